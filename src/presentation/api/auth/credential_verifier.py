"""
CredentialVerifier - Authentification et autorisation des operateurs.

Responsabilite unique:
----------------------
Transformer un header Authorization en OperatorIdentity, ou lever
l'erreur adaptee:

    header absent / pas "Bearer <token>"   -> UnauthorizedError (401)
    signature, expiration invalides        -> UnauthorizedError (401)
    claim "sub" absent ou non chaine       -> UnauthorizedError (401)
    echec de la requete sur le registre    -> OperatorStoreError (500)
    sujet absent du registre               -> ForbiddenError (403)

Dependances:
------------
- JWTService: Verification du token
- OperatorRepository: Registre des operateurs (interroge a CHAQUE appel)
"""

from typing import Optional

from src.domain.entities.operator import OperatorIdentity
from src.domain.exceptions import ForbiddenError, UnauthorizedError
from src.domain.ports.operator_repository import OperatorRepository
from src.infrastructure.logging import get_logger
from src.presentation.api.auth.jwt_service import JWTService

logger = get_logger(__name__)

_BEARER_PREFIX = "Bearer "


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Retourne le token d'un header "Bearer <token>", None sinon."""
    if not authorization or not authorization.startswith(_BEARER_PREFIX):
        return None
    token = authorization[len(_BEARER_PREFIX):].strip()
    return token or None


class CredentialVerifier:
    """
    Verificateur d'operateurs privilegies.

    Example:
        >>> verifier = CredentialVerifier(jwt_service, operator_repo)
        >>> operator = verifier.verify("Bearer eyJhbGciOi...")
    """

    def __init__(self, jwt_service: JWTService, operators: OperatorRepository):
        """
        Initialise le verificateur.

        Args:
            jwt_service: Service de verification JWT.
            operators: Registre des operateurs privilegies.
        """
        self._jwt_service = jwt_service
        self._operators = operators

    def verify(self, authorization: Optional[str]) -> OperatorIdentity:
        """
        Authentifie et autorise l'appelant.

        Args:
            authorization: Valeur brute du header Authorization.

        Returns:
            OperatorIdentity de l'appelant.

        Raises:
            UnauthorizedError: Token absent, invalide ou sans sujet.
            ForbiddenError: Sujet hors du registre.
            OperatorStoreError: Registre injoignable.
        """
        token = extract_bearer_token(authorization)
        if token is None:
            raise UnauthorizedError("missing_token")

        payload = self._jwt_service.verify_access_token(token)
        if payload is None:
            raise UnauthorizedError("invalid_token")

        if not self._operators.is_privileged(payload.subject):
            logger.warning("operator_forbidden", subject=payload.subject)
            raise ForbiddenError(payload.subject)

        return OperatorIdentity(subject=payload.subject)
