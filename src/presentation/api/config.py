"""
Configuration API - Settings Pydantic.

Responsabilite unique:
----------------------
Charger et valider la configuration HTTP depuis les variables d'env.

Variables:
----------
- JWT_SECRET: Secret partage HS256 (obligatoire)
- BACKUP_PORT: Port d'ecoute (defaut: 7000)
- BACKUP_CORS_ORIGIN: Origine autorisee ("*" renvoie l'Origin de la requete)
- LOG_JSON / LOG_LEVEL: Mode et niveau de logging
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class APISettings(BaseSettings):
    """
    Configuration de l'API REST.

    Chargee depuis les variables d'environnement. L'absence de
    JWT_SECRET est fatale au demarrage (ValidationError).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    # JWT
    jwt_secret: str
    jwt_algorithm: str = "HS256"

    # API
    api_title: str = "Backup Service"
    api_version: str = "1.0.0"
    backup_host: str = "0.0.0.0"
    backup_port: int = 7000

    # CORS
    backup_cors_origin: str = "*"

    # Logging
    log_json: bool = False
    log_level: str = "INFO"

    @field_validator("jwt_secret")
    @classmethod
    def _require_secret(cls, value: str) -> str:
        if not value:
            raise ValueError("JWT_SECRET is required")
        return value

    @field_validator("jwt_algorithm")
    @classmethod
    def _only_hs256(cls, value: str) -> str:
        if value != "HS256":
            raise ValueError("Only HS256 tokens are supported")
        return value


@lru_cache
def get_settings() -> APISettings:
    """Retourne la configuration (cached)."""
    return APISettings()
