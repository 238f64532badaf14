"""
BackupJobs - Jobs de sauvegarde/restauration sous exclusion mutuelle.

Responsabilite unique:
----------------------
Encadrer chaque appel a l'executeur par le JobGuard: acquisition
avant le lancement du processus, liberation sur TOUS les chemins de
sortie (succes, exception). L'API et le planificateur passent par ce
use case et partagent donc le meme garde.

Dependances:
------------
- JobGuard: Slot unique du job en cours
- BackupService: Executeur pg_dump/pg_restore

Libelles:
---------
- "manual-backup": POST /backups
- "restore:<nom>": POST /backups/<nom>/restore
- "daily-backup": declenchement cron
"""

from typing import Optional

from src.domain.entities.backup_artifact import BackupArtifact, BackupType
from src.domain.exceptions import DomainException
from src.domain.services.job_guard import JobGuard
from src.infrastructure.backup.service import BackupService
from src.infrastructure.logging import get_logger

logger = get_logger(__name__)

MANUAL_BACKUP_LABEL = "manual-backup"
DAILY_BACKUP_LABEL = "daily-backup"


def restore_label(name: str) -> str:
    """Libelle du job de restauration."""
    return f"restore:{name}"


class BackupJobs:
    """
    Use case des jobs gardes.

    Example:
        >>> jobs = BackupJobs(JobGuard(), service)
        >>> artifact = await jobs.create_manual_backup()
    """

    def __init__(self, guard: JobGuard, service: BackupService):
        """
        Initialise le use case.

        Args:
            guard: Garde partage avec le planificateur.
            service: Executeur de dump/restauration.
        """
        self._guard = guard
        self._service = service

    async def create_manual_backup(self) -> BackupArtifact:
        """
        Cree un dump manuel.

        Raises:
            JobConflictError: Si un job est deja en cours.
            BackupFailedError: Si pg_dump echoue.
        """
        with self._guard.hold(MANUAL_BACKUP_LABEL):
            return await self._service.create_backup(BackupType.MANUAL)

    async def restore(self, name: str) -> None:
        """
        Restaure un dump.

        Raises:
            JobConflictError: Si un job est deja en cours.
            InvalidBackupNameError, BackupNotFoundError, RestoreFailedError.
        """
        with self._guard.hold(restore_label(name)):
            await self._service.restore_backup(name)

    async def run_scheduled_backup(self) -> Optional[BackupArtifact]:
        """
        Dump declenche par le cron.

        Ne leve jamais: un job deja en cours fait sauter le cycle,
        un echec est logue puis ignore. Le prochain declenchement
        est la seule reprise.

        Returns:
            L'artefact cree, None si saute ou en echec.
        """
        if not self._guard.try_acquire(DAILY_BACKUP_LABEL):
            logger.info("scheduled_backup_skipped", running_job=self._guard.label)
            return None
        try:
            return await self._service.create_backup(BackupType.DAILY)
        except DomainException as e:
            logger.error("scheduled_backup_failed", error=e.message, code=e.code)
            return None
        except Exception as e:
            logger.exception("scheduled_backup_failed", error=str(e))
            return None
        finally:
            self._guard.release()
