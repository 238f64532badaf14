"""
SqlAlchemyOperatorRepository - Adapter SQLAlchemy du registre des operateurs.

Implemente le port OperatorRepository.
Responsabilite unique: une requete "select 1 ... where user_id::text = :sujet"
(la conversion en texte evite une erreur SQL pour un sujet qui n'est pas un UUID).
"""

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from src.domain.exceptions import OperatorStoreError
from src.domain.ports.operator_repository import OperatorRepository
from src.infrastructure.logging import get_logger
from src.infrastructure.persistence.database import DatabaseManager

logger = get_logger(__name__)


class SqlAlchemyOperatorRepository(OperatorRepository):
    """
    Repository SQLAlchemy pour les operateurs privilegies.

    Attributes:
        db: DatabaseManager pour les sessions.
    """

    def __init__(self, db: DatabaseManager, table: str = "public.super_admins"):
        """
        Initialise le repository.

        Args:
            db: Instance DatabaseManager.
            table: Table du registre (identifiant deja valide par BackupSettings).
        """
        self._db = db
        self._query = text(f"select 1 from {table} where user_id::text = :user_id limit 1")

    def is_privileged(self, subject: str) -> bool:
        """Verifie l'appartenance du sujet au registre."""
        try:
            with self._db.get_session() as session:
                row = session.execute(self._query, {"user_id": subject}).first()
        except SQLAlchemyError as e:
            logger.error("operator_lookup_failed", error=str(e))
            raise OperatorStoreError("Database error") from e
        return row is not None
