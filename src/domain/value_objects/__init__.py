"""
Value Objects du domaine.

Regles de nommage des sauvegardes: fonctions pures, sans etat,
utilisables par toutes les couches.
"""

from src.domain.value_objects.backup_name import (
    BACKUP_SUFFIX,
    build_backup_name,
    classify_backup_name,
    is_safe_backup_name,
)

__all__ = [
    "BACKUP_SUFFIX",
    "build_backup_name",
    "classify_backup_name",
    "is_safe_backup_name",
]
