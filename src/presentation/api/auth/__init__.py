"""
Auth API - Verification des operateurs privilegies.

Composants:
-----------
- JWTService: Verification HS256 des bearer tokens
- CredentialVerifier: Token + registre -> OperatorIdentity
"""

from src.presentation.api.auth.credential_verifier import CredentialVerifier
from src.presentation.api.auth.jwt_service import JWTService, TokenPayload

__all__ = ["CredentialVerifier", "JWTService", "TokenPayload"]
