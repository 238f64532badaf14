"""
Dependencies - Injection de dependances FastAPI.

Responsabilite unique:
----------------------
Fournir les composants du conteneur (stocke dans app.state) et
l'operateur authentifie aux endpoints.

Usage:
------
    @router.get("/backups")
    def list_backups(operator: OperatorIdentity = Depends(get_current_operator)):
        ...
"""

from fastapi import Depends, Request

from src.domain.entities.operator import OperatorIdentity
from src.infrastructure.container import Container
from src.presentation.api.auth.credential_verifier import CredentialVerifier
from src.presentation.api.auth.jwt_service import JWTService
from src.presentation.api.config import APISettings


def get_container(request: Request) -> Container:
    """Retourne le conteneur de l'application."""
    return request.app.state.container


def get_api_settings(request: Request) -> APISettings:
    """Retourne la configuration API de l'application."""
    return request.app.state.settings


def get_jwt_service(
    settings: APISettings = Depends(get_api_settings),
) -> JWTService:
    """Retourne le JWTService."""
    return JWTService(settings)


def get_credential_verifier(
    jwt_service: JWTService = Depends(get_jwt_service),
    container: Container = Depends(get_container),
) -> CredentialVerifier:
    """Retourne le CredentialVerifier."""
    return CredentialVerifier(jwt_service, container.operators)


def get_current_operator(
    request: Request,
    verifier: CredentialVerifier = Depends(get_credential_verifier),
) -> OperatorIdentity:
    """
    Retourne l'operateur courant.

    Fonction synchrone: FastAPI l'execute dans son threadpool, la
    requete sur le registre ne bloque donc pas la boucle.

    Raises:
        UnauthorizedError, ForbiddenError, OperatorStoreError
        (traduites en 401/403/500 par les exception handlers).
    """
    return verifier.verify(request.headers.get("Authorization"))
