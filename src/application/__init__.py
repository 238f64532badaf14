"""
Application Layer - Orchestration des Use Cases.

Cette couche contient:
    - use_cases/: Cas d'utilisation (jobs de sauvegarde gardes)

Principes:
    - Les dependances sont injectees via le constructeur
    - L'exclusion mutuelle des jobs est appliquee ici, pas dans l'executeur
"""

__all__ = []
