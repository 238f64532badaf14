"""
Infrastructure Layer - Adapters pour les services externes.

Cette couche contient les implementations concretes des ports definis
dans le domaine. Elle gere les interactions avec:
- Base de donnees PostgreSQL (registre des operateurs)
- Utilitaires pg_dump / pg_restore
- Systeme de fichiers (repertoire des dumps)
- APScheduler (backup recurrent)

Le conteneur (src.infrastructure.container) n'est pas re-exporte ici:
il importe la couche application, qui importe elle-meme ce package.
"""

__all__ = []
