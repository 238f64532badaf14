"""
DatabaseManager - Connexion SQLAlchemy au registre des operateurs.

Responsabilite unique:
----------------------
Fournir un moteur SQLAlchemy avec pool de connexions et un context
manager de session. Le service n'ecrit jamais dans la base: seule la
requete d'appartenance au registre des operateurs passe par ici
(les dumps passent par pg_dump/pg_restore).

Connection Pooling:
-------------------
- pool_size=2: Une requete par appel privilegie, peu de concurrence
- max_overflow=5: Connexions temporaires supplementaires
- pool_recycle=1800: Recyclage toutes les 30 min (evite timeout)
- pool_pre_ping=True: Verification avant utilisation (survit a une restauration)
"""

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker


class DatabaseManager:
    """
    Gestionnaire de connexion a la base PostgreSQL.

    Attributes:
        engine: Moteur SQLAlchemy avec pool de connexions.
        SessionLocal: Factory de sessions configuree.

    Example:
        >>> db = DatabaseManager("postgresql://postgres@localhost/app")
        >>> with db.get_session() as session:
        ...     session.execute(text("select 1"))
    """

    def __init__(self, database_url: str):
        self.engine = create_engine(
            database_url,
            pool_pre_ping=True,
            pool_size=2,
            max_overflow=5,
            pool_timeout=30,
            pool_recycle=1800,
            echo=False,
        )
        self.SessionLocal = sessionmaker(bind=self.engine, expire_on_commit=False)

    @contextmanager
    def get_session(self) -> Iterator[Session]:
        """Context manager pour les sessions avec gestion automatique des transactions."""
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def dispose(self) -> None:
        """Ferme toutes les connexions du pool."""
        self.engine.dispose()
