"""
Domain Layer - Coeur metier du service de sauvegarde.

Ce module contient:
    - entities/: BackupArtifact, OperatorIdentity
    - value_objects/: Regles de nommage des dumps
    - services/: JobGuard (exclusion mutuelle)
    - ports/: Interfaces vers l'exterieur (registre, processus)
    - exceptions: Exceptions metier

Principes:
    - AUCUNE dependance vers les couches externes
    - Logique metier pure
    - Testable sans infrastructure
"""

from src.domain.exceptions import (
    BackupFailedError,
    BackupNotFoundError,
    DomainException,
    ForbiddenError,
    InternalError,
    InvalidBackupNameError,
    JobConflictError,
    RestoreFailedError,
    UnauthorizedError,
)

__all__ = [
    "DomainException",
    "UnauthorizedError",
    "ForbiddenError",
    "JobConflictError",
    "InvalidBackupNameError",
    "BackupNotFoundError",
    "BackupFailedError",
    "RestoreFailedError",
    "InternalError",
]
