"""
Port OperatorRepository - Interface du registre des operateurs privilegies.

Responsabilite unique:
----------------------
Repondre a une seule question: le sujet X fait-il partie des
operateurs privilegies ? Aucun cache: chaque requete privilegiee
interroge le registre, un operateur retire perd l'acces a l'appel suivant.

Usage:
------
    class CredentialVerifier:
        def __init__(self, jwt_service, operators: OperatorRepository):
            self._operators = operators
"""

from abc import ABC, abstractmethod


class OperatorRepository(ABC):
    """
    Interface Repository pour les operateurs privilegies.

    Implementee par SqlAlchemyOperatorRepository.
    """

    @abstractmethod
    def is_privileged(self, subject: str) -> bool:
        """
        Verifie l'appartenance au registre.

        Args:
            subject: Identifiant du sujet (claim "sub").

        Returns:
            True si au moins une ligne correspond.

        Raises:
            OperatorStoreError: Si la requete echoue (transport, SQL).
        """
        ...
