"""
BackupArtifact Entity - Fichier de sauvegarde sur disque.

Responsabilite unique:
----------------------
Representer un dump produit par l'executeur. L'entite est construite
a partir des metadonnees du systeme de fichiers au moment de la
decouverte: rien n'est stocke de maniere redondante.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class BackupType(Enum):
    """Types de sauvegarde, derives du prefixe du nom."""

    MANUAL = "manual"  # Declenchee par un operateur
    DAILY = "daily"    # Declenchee par le planificateur


@dataclass(frozen=True)
class BackupArtifact:
    """
    Entite BackupArtifact.

    Immutable: un artefact n'est jamais modifie apres sa creation.

    Attributes:
        name: Nom du fichier (grammaire sure, unique dans le repertoire).
        type: Type de sauvegarde.
        created_at: Date de modification du fichier.
        size: Taille en octets.
    """

    name: str
    type: BackupType
    created_at: datetime
    size: int
