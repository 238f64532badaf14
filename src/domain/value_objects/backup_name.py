"""
Backup Name - Codec des noms de fichiers de sauvegarde.

Responsabilite unique:
----------------------
Deriver, classer et valider les noms de dump. Fonctions pures, sans I/O.

Grammaire:
----------
    ^[A-Za-z0-9._-]+$  et suffixe ".dump"
    Convention: <type>-YYYYMMDD-HHMMSS.dump

Securite:
---------
is_safe_backup_name() est l'unique barriere contre la traversee de
chemin et l'injection d'arguments: le nom est ensuite interpole dans
un chemin et dans la ligne de commande de pg_restore. Tout nom refuse
doit l'etre AVANT tout acces disque ou lancement de processus.

Usage:
------
    >>> build_backup_name(BackupType.MANUAL, datetime(2026, 1, 1, 12, 0, 0))
    'manual-20260101-120000.dump'
    >>> classify_backup_name("daily-20260101-120000.dump")
    <BackupType.DAILY: 'daily'>
"""

import re
from datetime import datetime
from typing import Optional

from src.domain.entities.backup_artifact import BackupType

BACKUP_SUFFIX = ".dump"

_SAFE_NAME = re.compile(r"^[A-Za-z0-9._-]+$")


def build_backup_name(backup_type: BackupType, now: Optional[datetime] = None) -> str:
    """
    Construit le nom d'une nouvelle sauvegarde.

    Resolution a la seconde: deux dumps du meme type dans la meme
    seconde ont le meme nom. BackupService refuse alors le second
    plutot que d'ecraser le premier.

    Args:
        backup_type: Type de sauvegarde (prefixe du nom).
        now: Instant en heure locale (defaut: maintenant).

    Returns:
        Nom au format "<type>-YYYYMMDD-HHMMSS.dump".
    """
    now = now or datetime.now()
    return f"{backup_type.value}-{now.strftime('%Y%m%d-%H%M%S')}{BACKUP_SUFFIX}"


def classify_backup_name(name: str) -> BackupType:
    """Retourne le type d'apres le prefixe (manual par defaut)."""
    if name.startswith("daily-"):
        return BackupType.DAILY
    return BackupType.MANUAL


def is_safe_backup_name(name: str) -> bool:
    """True si le nom respecte la grammaire sure et finit par .dump."""
    if not isinstance(name, str):
        return False
    return bool(_SAFE_NAME.fullmatch(name)) and name.endswith(BACKUP_SUFFIX)
