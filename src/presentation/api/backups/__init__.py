"""
Backups API - Liste, creation, restauration et telechargement des dumps.
"""

from src.presentation.api.backups.router import router

__all__ = ["router"]
