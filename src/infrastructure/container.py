"""
Container d'injection de dependances.

Ce module est la racine de composition du service: il cree UNE
instance de chaque composant et les connecte. Le JobGuard vit ici,
jamais dans une variable globale de module: chaque conteneur (et donc
chaque test) a son propre garde.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from src.application.use_cases.backup_jobs import BackupJobs
from src.domain.ports.command_runner import CommandRunner
from src.domain.ports.operator_repository import OperatorRepository
from src.domain.services.job_guard import JobGuard
from src.infrastructure.backup.archive_store import ArchiveStore
from src.infrastructure.backup.config import BackupSettings, get_backup_settings
from src.infrastructure.backup.process import AsyncioCommandRunner
from src.infrastructure.backup.scheduler import BackupScheduler
from src.infrastructure.backup.service import BackupService
from src.infrastructure.persistence.database import DatabaseManager
from src.infrastructure.persistence.operator_repository import SqlAlchemyOperatorRepository


@dataclass
class Container:
    """
    Conteneur d'injection de dependances.

    Example:
        >>> container = Container.create(BackupSettings(database_url="postgresql://..."))
        >>> artifact = await container.jobs.create_manual_backup()
    """

    settings: BackupSettings
    guard: JobGuard
    store: ArchiveStore
    service: BackupService
    jobs: BackupJobs
    scheduler: BackupScheduler
    operators: OperatorRepository

    # Absent quand le registre est injecte (tests)
    db_manager: Optional[DatabaseManager] = None

    @classmethod
    def create(
        cls,
        settings: BackupSettings,
        runner: Optional[CommandRunner] = None,
        operators: Optional[OperatorRepository] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> "Container":
        """
        Factory pour creer un conteneur avec toutes les dependances.

        Args:
            settings: Configuration des sauvegardes.
            runner: Executeur de processus (defaut: asyncio).
            operators: Registre des operateurs (defaut: SQLAlchemy sur DATABASE_URL).
            clock: Horloge pour le nom des dumps (defaut: datetime.now).

        Returns:
            Container configure avec tous les composants.
        """
        db_manager = None
        if operators is None:
            db_manager = DatabaseManager(settings.database_url)
            operators = SqlAlchemyOperatorRepository(
                db_manager, table=settings.backup_operator_table
            )

        guard = JobGuard()
        store = ArchiveStore(settings.backup_path)
        service = BackupService(
            settings,
            runner or AsyncioCommandRunner(),
            store,
            clock=clock or datetime.now,
        )
        jobs = BackupJobs(guard, service)

        return cls(
            settings=settings,
            guard=guard,
            store=store,
            service=service,
            jobs=jobs,
            scheduler=BackupScheduler(settings, jobs),
            operators=operators,
            db_manager=db_manager,
        )

    def close(self) -> None:
        """Libere les ressources (scheduler, pool de connexions)."""
        self.scheduler.stop()
        if self.db_manager is not None:
            self.db_manager.dispose()


# Singleton du processus servi par uvicorn
_container: Container | None = None


def get_container() -> Container:
    """
    Recupere ou cree le conteneur global depuis l'environnement.

    Returns:
        Instance du conteneur.
    """
    global _container
    if _container is None:
        _container = Container.create(get_backup_settings())
    return _container


def reset_container() -> None:
    """Reset le conteneur global (utile pour les tests)."""
    global _container
    _container = None
