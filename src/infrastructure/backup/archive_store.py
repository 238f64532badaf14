"""
ArchiveStore - Inventaire des dumps sur disque.

Responsabilite unique:
----------------------
Enumerer, stat-er, trier et purger les fichiers de sauvegarde du
repertoire de stockage. Aucun cache: chaque listing relit le disque.

Noms suspects:
--------------
Les fichiers dont le nom echoue is_safe_backup_name() sont ignores
silencieusement: un fichier corrompu ou malicieux ne doit pas faire
echouer tout le listing.

Usage:
------
    store = ArchiveStore(Path("/backups"))
    for artifact in store.list():
        print(artifact.name, artifact.size)
"""

from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, List

from src.domain.entities.backup_artifact import BackupArtifact
from src.domain.exceptions import ArchiveStoreError, InvalidBackupNameError
from src.domain.value_objects.backup_name import (
    classify_backup_name,
    is_safe_backup_name,
)
from src.infrastructure.logging import get_logger

logger = get_logger(__name__)


class ArchiveStore:
    """
    Lecteur du repertoire de sauvegarde.

    Attributes:
        directory: Repertoire de stockage des dumps.
    """

    def __init__(self, directory: Path):
        """
        Initialise le store.

        Args:
            directory: Repertoire de stockage (cree a la demande).
        """
        self.directory = Path(directory)

    def ensure_directory(self) -> None:
        """Cree le repertoire si necessaire (idempotent)."""
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ArchiveStoreError(
                f"Cannot create backup directory {self.directory}: {e}"
            ) from e

    def list(self) -> List[BackupArtifact]:
        """
        Liste les sauvegardes, la plus recente en premier.

        Returns:
            Artefacts tries par date de modification decroissante.

        Raises:
            ArchiveStoreError: Si le repertoire ou un fichier est illisible.
        """
        self.ensure_directory()
        try:
            names = sorted(entry.name for entry in self.directory.iterdir())
        except OSError as e:
            raise ArchiveStoreError(f"Cannot read backup directory: {e}") from e

        artifacts = [self.stat(name) for name in names if is_safe_backup_name(name)]
        # sorted() est stable: a date egale, l'ordre alphabetique est conserve
        return sorted(artifacts, key=lambda a: a.created_at, reverse=True)

    def path_for(self, name: str) -> Path:
        """
        Chemin complet d'un dump.

        Raises:
            InvalidBackupNameError: Si le nom n'est pas sur.
        """
        if not is_safe_backup_name(name):
            raise InvalidBackupNameError(name)
        return self.directory / name

    def exists(self, name: str) -> bool:
        """True si le dump existe (nom verifie avant l'acces disque)."""
        return self.path_for(name).is_file()

    def stat(self, name: str) -> BackupArtifact:
        """
        Construit l'artefact depuis les metadonnees du fichier.

        Raises:
            InvalidBackupNameError: Si le nom n'est pas sur.
            ArchiveStoreError: Si le stat echoue.
        """
        path = self.path_for(name)
        try:
            st = path.stat()
        except OSError as e:
            raise ArchiveStoreError(f"Cannot stat backup {name}: {e}") from e

        return BackupArtifact(
            name=name,
            type=classify_backup_name(name),
            created_at=datetime.fromtimestamp(st.st_mtime, tz=timezone.utc),
            size=st.st_size,
        )

    def prune(self, keep: int, protected: Iterable[str] = ()) -> List[str]:
        """
        Supprime les dumps au-dela des `keep` plus recents.

        Les noms proteges sont toujours conserves et comptent dans `keep`.
        Un echec de suppression est logue puis ignore.

        Args:
            keep: Nombre de dumps a conserver.
            protected: Noms a ne jamais supprimer.

        Returns:
            Noms supprimes.
        """
        protected_names = set(protected)
        kept = 0
        deleted = []

        for artifact in self.list():
            if artifact.name in protected_names or kept < keep:
                kept += 1
                continue
            try:
                (self.directory / artifact.name).unlink()
            except OSError as e:
                logger.warning("backup_prune_failed", filename=artifact.name, error=str(e))
                continue
            deleted.append(artifact.name)
            logger.info("backup_pruned", filename=artifact.name)

        return deleted
