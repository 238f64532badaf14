"""
Main - Factory FastAPI.

Responsabilite unique:
----------------------
Creer et configurer l'application FastAPI: conteneur, middlewares,
exception handlers, routers et cycle de vie du scheduler.

Usage:
------
    # Development
    uvicorn src.presentation.api.main:create_app --factory --reload

    # Production
    python run.py
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from starlette.middleware.base import BaseHTTPMiddleware

from src.infrastructure.container import Container, get_container
from src.infrastructure.logging import RequestLogger, configure_logging, get_logger
from src.presentation.api.backups.router import router as backups_router
from src.presentation.api.backups.schemas import ErrorResponse
from src.presentation.api.config import APISettings, get_settings
from src.presentation.api.cors import CorsHeaders
from src.presentation.api.errors import register_exception_handlers


def create_app(
    settings: Optional[APISettings] = None,
    container: Optional[Container] = None,
) -> FastAPI:
    """
    Factory pour creer l'application FastAPI.

    Args:
        settings: Configuration API (defaut: environnement).
        container: Conteneur de dependances (defaut: environnement).

    Returns:
        Application FastAPI configuree.

    Raises:
        pydantic.ValidationError: Si JWT_SECRET ou DATABASE_URL manque.
    """
    settings = settings or get_settings()
    container = container or get_container()

    configure_logging(json_logs=settings.log_json, log_level=settings.log_level)
    logger = get_logger("api")

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Demarre le scheduler sur la boucle de l'application."""
        container.scheduler.start()
        yield
        container.close()

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        docs_url="/docs",
        redoc_url=None,
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.container = container

    register_exception_handlers(app)

    # Request logging middleware
    app.add_middleware(BaseHTTPMiddleware, dispatch=RequestLogger())

    # CORS (ajoute en dernier: enveloppe tout, pre-flight compris)
    app.add_middleware(
        BaseHTTPMiddleware,
        dispatch=CorsHeaders(settings.backup_cors_origin),
    )

    # Health check
    @app.get("/health", tags=["Health"])
    def health():
        """Endpoint de sante (sans authentification)."""
        return {"status": "ok"}

    # Routers
    app.include_router(
        backups_router,
        responses={422: {"model": ErrorResponse}},
    )

    logger.info(
        "app_created",
        version=settings.api_version,
        backup_dir=str(container.settings.backup_path),
        cron=container.settings.backup_cron,
    )

    return app
