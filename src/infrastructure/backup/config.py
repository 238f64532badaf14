"""
Backup Config - Configuration des sauvegardes.

Responsabilite unique:
----------------------
Configurer les parametres de backup depuis l'environnement.

Variables:
----------
- DATABASE_URL: Base cible et registre des operateurs (obligatoire)
- BACKUP_DIR: Repertoire de stockage local
- BACKUP_CRON: Expression cron du backup recurrent (5 champs)
- BACKUP_SCHEMAS: Schemas a inclure, separes par des virgules (optionnel)
- BACKUP_RESTORE_DB_URL: Connexion dediee a la restauration (optionnel)
- BACKUP_RETENTION_COUNT: Nombre de dumps conserves
- BACKUP_PROCESS_TIMEOUT_SECONDS: Duree max de pg_dump/pg_restore (optionnel)
- BACKUP_OPERATOR_TABLE: Table des operateurs privilegies
"""

import re
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_RETENTION_COUNT = 30

_QUALIFIED_IDENTIFIER = re.compile(
    r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)?$"
)


class BackupSettings(BaseSettings):
    """
    Configuration des sauvegardes.

    Chargee depuis les variables d'environnement. L'absence de
    DATABASE_URL est fatale au demarrage (ValidationError).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    # Base de donnees
    database_url: str
    backup_restore_db_url: str = ""
    backup_operator_table: str = "public.super_admins"

    # Stockage local
    backup_dir: str = "/backups"
    backup_retention_count: int = DEFAULT_RETENTION_COUNT

    # pg_dump / pg_restore
    backup_schemas: str = ""
    backup_process_timeout_seconds: Optional[float] = None

    # Schedule (cron)
    backup_cron: str = "0 3 * * *"  # 3h du matin

    @field_validator("database_url")
    @classmethod
    def _require_database_url(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("DATABASE_URL is required")
        return value.strip()

    @field_validator("backup_retention_count")
    @classmethod
    def _positive_retention(cls, value: int) -> int:
        return value if value > 0 else DEFAULT_RETENTION_COUNT

    @field_validator("backup_process_timeout_seconds")
    @classmethod
    def _positive_timeout(cls, value: Optional[float]) -> Optional[float]:
        if value is not None and value <= 0:
            return None
        return value

    @field_validator("backup_operator_table")
    @classmethod
    def _safe_table_name(cls, value: str) -> str:
        if not _QUALIFIED_IDENTIFIER.fullmatch(value):
            raise ValueError(f"Invalid operator table name: {value}")
        return value

    @property
    def backup_path(self) -> Path:
        """Retourne le chemin de backup."""
        return Path(self.backup_dir)

    @property
    def schema_list(self) -> list[str]:
        """Schemas a passer a pg_dump/pg_restore (vide: toute la base)."""
        return [s.strip() for s in self.backup_schemas.split(",") if s.strip()]

    @property
    def restore_database_url(self) -> str:
        """Connexion utilisee par pg_restore."""
        return self.backup_restore_db_url or self.database_url


@lru_cache
def get_backup_settings() -> BackupSettings:
    """Retourne la configuration backup (cached)."""
    return BackupSettings()
