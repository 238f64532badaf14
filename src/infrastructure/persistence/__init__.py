"""
Adapters pour la persistence des donnees.

Ce module expose le DatabaseManager et le repository du registre
des operateurs privilegies.
"""

from src.infrastructure.persistence.database import DatabaseManager
from src.infrastructure.persistence.operator_repository import SqlAlchemyOperatorRepository

__all__ = [
    "DatabaseManager",
    "SqlAlchemyOperatorRepository",
]
