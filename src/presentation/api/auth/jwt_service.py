"""
JWTService - Verification des tokens JWT.

Responsabilite unique:
----------------------
Verifier la signature et l'expiration d'un token signe par le
fournisseur d'identite (secret partage, HS256 uniquement) et en
extraire le sujet. Ce service n'emet pas de tokens.

Usage:
------
    service = JWTService(settings)
    payload = service.verify_access_token(token)
"""

from dataclasses import dataclass
from typing import Any, Optional

import jwt
from jwt.exceptions import PyJWTError

from src.presentation.api.config import APISettings


@dataclass
class TokenPayload:
    """
    Payload decode d'un token JWT.

    Attributes:
        subject: Claim "sub" (identifiant de l'utilisateur).
        claims: Ensemble des claims verifies.
    """

    subject: str
    claims: dict[str, Any]


class JWTService:
    """
    Service de verification JWT.

    Un seul algorithme est accepte: un token "alg: none" ou signe
    avec un autre algorithme est refuse par PyJWT.
    """

    def __init__(self, settings: APISettings):
        """
        Initialise le service.

        Args:
            settings: Configuration API.
        """
        self._secret = settings.jwt_secret
        self._algorithm = settings.jwt_algorithm

    def verify_access_token(self, token: str) -> Optional[TokenPayload]:
        """
        Verifie un access token.

        Args:
            token: Token JWT.

        Returns:
            TokenPayload si valide avec un "sub" de type chaine, None sinon.
        """
        payload = self._decode(token)
        if not isinstance(payload, dict):
            return None

        subject = payload.get("sub")
        if not subject or not isinstance(subject, str):
            return None

        return TokenPayload(subject=subject, claims=payload)

    def _decode(self, token: str) -> Optional[dict]:
        """Decode un JWT, retourne None si invalide ou expire."""
        try:
            return jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                # Les tokens du fournisseur portent un "aud" non verifie ici
                options={"verify_aud": False, "verify_sub": False},
            )
        except PyJWTError:
            return None
