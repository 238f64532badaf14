"""
Backups Schemas - Modeles Pydantic pour les endpoints de sauvegarde.

Responsabilite unique:
----------------------
Definir les schemas de reponse. Les cles JSON suivent le contrat
(camelCase pour createdAt).
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from src.domain.entities.backup_artifact import BackupArtifact


class BackupResponse(BaseModel):
    """Representation d'un dump."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    type: str
    created_at: datetime = Field(alias="createdAt")
    size: int

    @classmethod
    def from_artifact(cls, artifact: BackupArtifact) -> "BackupResponse":
        """Convertit un BackupArtifact."""
        return cls(
            name=artifact.name,
            type=artifact.type.value,
            created_at=artifact.created_at,
            size=artifact.size,
        )


class BackupListResponse(BaseModel):
    """Liste des dumps, le plus recent en premier."""

    backups: list[BackupResponse]


class BackupCreatedResponse(BaseModel):
    """Dump cree."""

    backup: BackupResponse


class RestoreResponse(BaseModel):
    """Restauration terminee."""

    success: bool = True


class ErrorResponse(BaseModel):
    """Corps des reponses d'erreur."""

    error: str
