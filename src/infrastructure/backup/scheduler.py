"""
BackupScheduler - Planificateur des sauvegardes recurrentes.

Responsabilite unique:
----------------------
Declencher BackupJobs.run_scheduled_backup() selon BACKUP_CRON.

Le scheduler tourne sur la boucle asyncio de l'application
(AsyncIOScheduler): le job planifie partage ainsi le JobGuard avec
les requetes HTTP sans introduire de thread. Si un job est deja en
cours, le cycle est saute (pas de file d'attente, pas de reprise).

Usage:
------
    scheduler = BackupScheduler(settings, jobs)
    scheduler.start()  # Dans le lifespan FastAPI (boucle active)
    scheduler.stop()
"""

from datetime import datetime
from typing import Optional

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.cron import CronTrigger

from src.application.use_cases.backup_jobs import BackupJobs
from src.infrastructure.backup.config import BackupSettings
from src.infrastructure.logging import get_logger

logger = get_logger(__name__)

JOB_ID = "daily_backup"


class BackupScheduler:
    """
    Planificateur de sauvegardes automatiques.

    Execute les backups selon le cron configure.
    """

    def __init__(
        self,
        settings: BackupSettings,
        jobs: BackupJobs,
        scheduler: Optional[AsyncIOScheduler] = None,
    ):
        """
        Initialise le scheduler.

        Args:
            settings: Configuration des sauvegardes.
            jobs: Use case des jobs gardes (garde partage avec l'API).
            scheduler: Scheduler APScheduler (defaut: AsyncIOScheduler).

        Raises:
            ValueError: Si BACKUP_CRON n'est pas une expression cron valide.
        """
        self._settings = settings
        self._jobs = jobs
        self._trigger = CronTrigger.from_crontab(settings.backup_cron)
        self._scheduler = scheduler or AsyncIOScheduler()
        self._running = False

    def start(self) -> None:
        """
        Demarre le scheduler.

        Doit etre appele depuis une boucle asyncio active.
        """
        if self._running:
            logger.warning("scheduler_already_running")
            return

        self._scheduler.add_job(
            self.run_once,
            trigger=self._trigger,
            id=JOB_ID,
            name="Backup quotidien",
            replace_existing=True,
            max_instances=1,
            coalesce=True,
        )

        self._scheduler.start()
        self._running = True

        logger.info("scheduler_started", cron=self._settings.backup_cron)

    def stop(self) -> None:
        """Arrete le scheduler."""
        if not self._running:
            return

        self._scheduler.shutdown(wait=False)
        self._running = False

        logger.info("scheduler_stopped")

    async def run_once(self) -> None:
        """Execute un cycle planifie (ne leve jamais)."""
        logger.info("scheduled_backup_started")
        artifact = await self._jobs.run_scheduled_backup()
        if artifact is not None:
            logger.info(
                "scheduled_backup_completed",
                filename=artifact.name,
                size_bytes=artifact.size,
            )

    @property
    def is_running(self) -> bool:
        """Retourne True si le scheduler est actif."""
        return self._running

    @property
    def next_run(self) -> Optional[datetime]:
        """Retourne la prochaine execution planifiee."""
        if not self._running:
            return None

        job = self._scheduler.get_job(JOB_ID)
        if job:
            return job.next_run_time
        return None
