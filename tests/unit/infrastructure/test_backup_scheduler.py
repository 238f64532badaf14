"""
Tests unitaires pour le BackupScheduler.

Le scheduler n'est jamais demarre hors d'une boucle asyncio:
les cycles sont declenches via run_once().
"""

import asyncio
from datetime import datetime
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.backup_jobs import BackupJobs
from src.domain.services.job_guard import JobGuard
from src.infrastructure.backup.archive_store import ArchiveStore
from src.infrastructure.backup.config import BackupSettings
from src.infrastructure.backup.scheduler import JOB_ID, BackupScheduler
from src.infrastructure.backup.service import BackupService


@pytest.fixture
def jobs(backup_settings, runner):
    """Use case avec runner espion."""
    service = BackupService(
        backup_settings,
        runner,
        ArchiveStore(backup_settings.backup_path),
        clock=lambda: datetime(2026, 1, 1, 3, 0, 0),
    )
    return BackupJobs(JobGuard(), service)


class TestBackupSchedulerConfig:
    """Tests pour la configuration du cron."""

    def test_invalid_cron_raises(self, backup_dir, jobs):
        """Une expression cron invalide est refusee a la construction."""
        settings = BackupSettings(
            _env_file=None,
            database_url="postgresql://db/app",
            backup_dir=str(backup_dir),
            backup_cron="every day",
        )

        with pytest.raises(ValueError):
            BackupScheduler(settings, jobs)

    def test_not_running_before_start(self, backup_settings, jobs):
        """Avant start(), aucun prochain declenchement."""
        scheduler = BackupScheduler(backup_settings, jobs)

        assert scheduler.is_running is False
        assert scheduler.next_run is None

    def test_start_registers_single_instance_job(self, backup_settings, jobs):
        """start() enregistre un job unique, sans rattrapage multiple."""
        apscheduler = MagicMock()
        scheduler = BackupScheduler(backup_settings, jobs, scheduler=apscheduler)

        scheduler.start()

        kwargs = apscheduler.add_job.call_args.kwargs
        assert kwargs["id"] == JOB_ID
        assert kwargs["max_instances"] == 1
        assert kwargs["coalesce"] is True
        apscheduler.start.assert_called_once()
        assert scheduler.is_running is True

    def test_start_twice_is_noop(self, backup_settings, jobs):
        """Un second start() ne re-enregistre pas le job."""
        apscheduler = MagicMock()
        scheduler = BackupScheduler(backup_settings, jobs, scheduler=apscheduler)

        scheduler.start()
        scheduler.start()

        assert apscheduler.add_job.call_count == 1

    def test_stop(self, backup_settings, jobs):
        """stop() arrete le scheduler sans attendre le job en cours."""
        apscheduler = MagicMock()
        scheduler = BackupScheduler(backup_settings, jobs, scheduler=apscheduler)
        scheduler.start()

        scheduler.stop()

        apscheduler.shutdown.assert_called_once_with(wait=False)
        assert scheduler.is_running is False


class TestBackupSchedulerRunOnce:
    """Tests pour un cycle planifie."""

    def test_creates_daily_dump(self, backup_settings, jobs, runner, backup_dir):
        """Un cycle produit un dump daily-."""
        scheduler = BackupScheduler(backup_settings, jobs)

        asyncio.run(scheduler.run_once())

        assert runner.programs == ["pg_dump"]
        assert (backup_dir / "daily-20260101-030000.dump").exists()

    def test_skipped_when_job_running(self, backup_settings, runner):
        """Si un job tourne, le cycle est saute sans lancer pg_dump."""
        guard = JobGuard()
        service = BackupService(
            backup_settings, runner, ArchiveStore(backup_settings.backup_path)
        )
        scheduler = BackupScheduler(backup_settings, BackupJobs(guard, service))
        guard.try_acquire("manual-backup")

        asyncio.run(scheduler.run_once())

        assert runner.calls == []
        assert guard.label == "manual-backup"

    def test_failure_does_not_raise(self, backup_settings, jobs, runner):
        """Un pg_dump en echec est logue, pas propage."""
        runner.returncode = 1
        scheduler = BackupScheduler(backup_settings, jobs)

        asyncio.run(scheduler.run_once())

        assert runner.programs == ["pg_dump"]
