"""
Errors - Traduction des exceptions en reponses HTTP.

Responsabilite unique:
----------------------
Rendre toutes les erreurs sous la forme {"error": "<message>"}.

Correspondance:
---------------
- UnauthorizedError -> 401
- ForbiddenError -> 403
- JobConflictError -> 409 (libelle du job en cours)
- Autres DomainException (nom invalide, introuvable, echec de
  dump/restauration, erreur interne) -> 500 avec le message
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.domain.exceptions import (
    DomainException,
    ForbiddenError,
    JobConflictError,
    UnauthorizedError,
)
from src.infrastructure.logging import get_logger

logger = get_logger(__name__)

_STATUS_BY_ERROR = (
    (UnauthorizedError, status.HTTP_401_UNAUTHORIZED),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
    (JobConflictError, status.HTTP_409_CONFLICT),
)


def status_for(exc: DomainException) -> int:
    """Code HTTP d'une exception du domaine."""
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(status_code: int, message: str, headers: dict | None = None) -> JSONResponse:
    """Reponse d'erreur au format du contrat."""
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    """Traduit une DomainException."""
    status_code = status_for(exc)
    if isinstance(exc, JobConflictError):
        logger.info("job_conflict", running_job=exc.label)
    elif status_code >= 500:
        logger.error("request_error", code=exc.code, error=exc.message)

    headers = None
    if isinstance(exc, UnauthorizedError):
        headers = {"WWW-Authenticate": "Bearer"}
    return error_response(status_code, exc.message, headers)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Rend les HTTPException au format {"error": ...}."""
    return error_response(exc.status_code, str(exc.detail), getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Rend les erreurs de validation au format {"error": ...}."""
    return error_response(422, "Invalid request.")


def register_exception_handlers(app: FastAPI) -> None:
    """Enregistre les handlers sur l'application."""
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
