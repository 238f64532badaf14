"""
Services du domaine.

Services metier purs, sans dependance d'infrastructure:
    - JobGuard: Exclusion mutuelle des jobs de sauvegarde/restauration
"""

from src.domain.services.job_guard import JobGuard

__all__ = ["JobGuard"]
