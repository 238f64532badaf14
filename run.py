#!/usr/bin/env python3
"""
Point d'entree principal pour lancer le service de sauvegarde.

Usage:
------
    python3 run.py
    # ou directement:
    uvicorn src.presentation.api.main:create_app --factory --port 7000

Comportement:
-------------
1. Charge et valide la configuration (JWT_SECRET, DATABASE_URL obligatoires)
2. Construit l'application (conteneur, routers, scheduler)
3. Lance uvicorn sur BACKUP_HOST:BACKUP_PORT

Erreurs courantes:
------------------
- "missing_configuration" : definir JWT_SECRET et DATABASE_URL
- "pg_dump could not be started" : installer les outils clients PostgreSQL
"""
import sys

import uvicorn
from pydantic import ValidationError

from src.infrastructure.logging import configure_logging, get_logger


def main():
    """Lance l'API de sauvegarde."""
    configure_logging()
    logger = get_logger("run")

    try:
        from src.presentation.api.config import get_settings
        from src.presentation.api.main import create_app

        settings = get_settings()
        app = create_app(settings)
    except ValidationError as e:
        fields = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
        logger.error("missing_configuration", fields=fields)
        sys.exit(1)

    logger.info("backup_service_listening", port=settings.backup_port)
    uvicorn.run(app, host=settings.backup_host, port=settings.backup_port, log_config=None)


if __name__ == "__main__":
    main()
