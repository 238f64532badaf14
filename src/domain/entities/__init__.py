"""
Entites du domaine.

Entites principales:
    - BackupArtifact: Fichier de dump present dans le repertoire de stockage
    - OperatorIdentity: Appelant authentifie et autorise
"""

from src.domain.entities.backup_artifact import BackupArtifact, BackupType
from src.domain.entities.operator import OperatorIdentity

__all__ = [
    "BackupArtifact",
    "BackupType",
    "OperatorIdentity",
]
