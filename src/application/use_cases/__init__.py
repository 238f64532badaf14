"""
Use Cases de l'application.

Les Use Cases orchestrent les services du domaine et de
l'infrastructure pour realiser les fonctionnalites du service.

Use cases:
    - BackupJobs: Dump manuel, restauration et dump planifie sous JobGuard
"""

from src.application.use_cases.backup_jobs import (
    DAILY_BACKUP_LABEL,
    MANUAL_BACKUP_LABEL,
    BackupJobs,
    restore_label,
)

__all__ = [
    "BackupJobs",
    "DAILY_BACKUP_LABEL",
    "MANUAL_BACKUP_LABEL",
    "restore_label",
]
