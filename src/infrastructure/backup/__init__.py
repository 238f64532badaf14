"""
Backup Infrastructure - Sauvegarde PostgreSQL.

Responsabilite:
---------------
Piloter pg_dump/pg_restore et gerer les fichiers de dump.

Features:
---------
- Dump manuel et quotidien (cron)
- Restauration destructive (--clean --if-exists)
- Retention par nombre de fichiers
- Timeout optionnel des processus
"""

from src.infrastructure.backup.archive_store import ArchiveStore
from src.infrastructure.backup.config import BackupSettings, get_backup_settings
from src.infrastructure.backup.process import AsyncioCommandRunner
from src.infrastructure.backup.service import BackupService

__all__ = [
    "ArchiveStore",
    "AsyncioCommandRunner",
    "BackupService",
    "BackupSettings",
    "get_backup_settings",
]
