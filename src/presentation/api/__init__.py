"""
API REST - FastAPI.

Presentation layer du service de sauvegarde.
Utilise JWT (HS256) + registre des operateurs pour l'autorisation.

Routers disponibles:
--------------------
- backups: Liste, creation, restauration, telechargement
- /health: Sonde sans authentification

Usage:
------
    uvicorn src.presentation.api.main:create_app --factory --reload
"""

from src.presentation.api.main import create_app

__all__ = ["create_app"]
