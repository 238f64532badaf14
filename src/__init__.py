"""
Backup Service - Architecture Hexagonale

Structure:
    - domain/: Coeur metier (artefacts, noms de dumps, JobGuard)
    - application/: Use cases (jobs gardes)
    - infrastructure/: Adapters (pg_dump/pg_restore, disque, registre SQL, cron)
    - presentation/: API REST (FastAPI)
"""

__version__ = "1.0.0"
