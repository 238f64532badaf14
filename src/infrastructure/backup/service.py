"""
BackupService - Executeur de dump/restauration PostgreSQL.

Responsabilite unique:
----------------------
Piloter pg_dump et pg_restore, et traduire leur issue en artefact
ou en exception metier. Ce service ne gere PAS l'exclusion mutuelle:
l'appelant doit detenir le JobGuard (voir BackupJobs).

Usage:
------
    service = BackupService(settings, AsyncioCommandRunner(), store)
    artifact = await service.create_backup(BackupType.MANUAL)
    await service.restore_backup("manual-20260101-120000.dump")

Warning:
--------
restore_backup() ecrase les donnees existantes (--clean) et ne prend
aucun snapshot prealable.
"""

import asyncio
from datetime import datetime
from typing import Callable, Dict, List, Optional, Tuple

from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError

from src.domain.entities.backup_artifact import BackupArtifact, BackupType
from src.domain.exceptions import (
    ArchiveStoreError,
    BackupFailedError,
    BackupNotFoundError,
    InvalidBackupNameError,
    RestoreFailedError,
)
from src.domain.ports.command_runner import CommandRunner, ProcessResult
from src.domain.value_objects.backup_name import build_backup_name, is_safe_backup_name
from src.infrastructure.backup.archive_store import ArchiveStore
from src.infrastructure.backup.config import BackupSettings
from src.infrastructure.logging import get_logger

logger = get_logger(__name__)

APPLICATION_NAME = "backup-service"


def libpq_connection(database_url: str) -> Tuple[str, Dict[str, str]]:
    """
    Separe le mot de passe de l'URL de connexion.

    Le mot de passe passe par PGPASSWORD plutot que par argv, visible
    dans la liste des processus. Une chaine que SQLAlchemy ne sait pas
    lire (DSN "host=... dbname=...") est transmise telle quelle.

    Returns:
        (URL sans mot de passe, variables d'environnement libpq).
    """
    env = {"PGAPPNAME": APPLICATION_NAME}
    try:
        url = make_url(database_url)
    except ArgumentError:
        return database_url, env
    if url.password is None:
        return database_url, env

    env["PGPASSWORD"] = str(url.password)
    return url.set(password=None).render_as_string(hide_password=False), env


class BackupService:
    """
    Service de sauvegarde PostgreSQL.

    Cree et restaure les dumps au format custom de pg_dump.
    """

    def __init__(
        self,
        settings: BackupSettings,
        runner: CommandRunner,
        store: ArchiveStore,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """
        Initialise le service de backup.

        Args:
            settings: Configuration des sauvegardes.
            runner: Executeur de processus externes.
            store: Inventaire du repertoire de stockage.
            clock: Source de l'heure locale (nom des fichiers).
        """
        self._settings = settings
        self._runner = runner
        self._store = store
        self._clock = clock

    async def create_backup(self, backup_type: BackupType) -> BackupArtifact:
        """
        Cree un dump de la base.

        Args:
            backup_type: Type de sauvegarde (prefixe du nom).

        Returns:
            BackupArtifact du fichier produit.

        Raises:
            BackupFailedError: Si pg_dump echoue, ou si un dump du meme nom
                existe deja (deux dumps dans la meme seconde). Un fichier
                partiel peut rester sur disque mais n'est jamais retourne.
            ArchiveStoreError: Si le repertoire ou le fichier est illisible.
        """
        # Acces disque hors de la boucle asyncio
        await asyncio.to_thread(self._store.ensure_directory)
        filename = build_backup_name(backup_type, self._clock())
        filepath = self._store.path_for(filename)
        if await asyncio.to_thread(filepath.exists):
            logger.error("backup_name_taken", filename=filename)
            raise BackupFailedError(f"Backup already exists: {filename}")

        logger.info("backup_started", filename=filename, type=backup_type.value)

        dsn, env = libpq_connection(self._settings.database_url)
        result = await self._runner.run(
            self._dump_command(str(filepath), dsn),
            env=env,
            timeout=self._settings.backup_process_timeout_seconds,
        )
        if not result.ok:
            self._log_failure("backup_failed", filename, result)
            raise BackupFailedError(result.describe_failure(), result.returncode)

        artifact = await asyncio.to_thread(self._store.stat, filename)
        logger.info(
            "backup_completed",
            filename=filename,
            size_bytes=artifact.size,
            duration_seconds=round(result.duration_seconds, 2),
        )

        await asyncio.to_thread(self._cleanup_old_backups, [filename])
        return artifact

    async def restore_backup(self, name: str) -> None:
        """
        Restaure un dump dans la base cible.

        Args:
            name: Nom du fichier a restaurer.

        Raises:
            InvalidBackupNameError: Nom refuse (avant tout acces disque).
            BackupNotFoundError: Fichier absent.
            RestoreFailedError: Si pg_restore echoue.
        """
        if not is_safe_backup_name(name):
            raise InvalidBackupNameError(name)
        if not await asyncio.to_thread(self._store.exists, name):
            raise BackupNotFoundError(name)

        filepath = self._store.path_for(name)
        logger.warning("restore_started", filename=name)

        dsn, env = libpq_connection(self._settings.restore_database_url)
        result = await self._runner.run(
            self._restore_command(str(filepath), dsn),
            env=env,
            timeout=self._settings.backup_process_timeout_seconds,
        )
        if not result.ok:
            self._log_failure("restore_failed", name, result)
            raise RestoreFailedError(result.describe_failure(), result.returncode)

        logger.info(
            "restore_completed",
            filename=name,
            duration_seconds=round(result.duration_seconds, 2),
        )

    def _dump_command(self, filepath: str, dsn: str) -> List[str]:
        """Ligne de commande pg_dump."""
        return [
            "pg_dump",
            "--format=custom",
            "--no-owner",
            *self._schema_args(),
            "--file",
            filepath,
            "--dbname",
            dsn,
        ]

    def _restore_command(self, filepath: str, dsn: str) -> List[str]:
        """Ligne de commande pg_restore."""
        return [
            "pg_restore",
            "--clean",
            "--if-exists",
            "--single-transaction",
            "--exit-on-error",
            "--no-owner",
            *self._schema_args(),
            "--dbname",
            dsn,
            filepath,
        ]

    def _schema_args(self) -> List[str]:
        args = []
        for schema in self._settings.schema_list:
            args.extend(["--schema", schema])
        return args

    def _cleanup_old_backups(self, protected: List[str]) -> Optional[List[str]]:
        """
        Applique la retention apres un dump reussi.

        Returns:
            Noms supprimes, None si la purge a echoue.
        """
        try:
            return self._store.prune(
                keep=self._settings.backup_retention_count,
                protected=protected,
            )
        except ArchiveStoreError as e:
            logger.warning("backup_retention_failed", error=e.message)
            return None

    def _log_failure(self, event: str, filename: str, result: ProcessResult) -> None:
        logger.error(
            event,
            filename=filename,
            returncode=result.returncode,
            timed_out=result.timed_out,
            spawn_error=result.spawn_error,
            stderr=result.stderr[-2000:],
            stdout=result.stdout[-2000:],
        )
