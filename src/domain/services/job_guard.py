"""
JobGuard - Exclusion mutuelle des jobs de sauvegarde/restauration.

Responsabilite unique:
----------------------
Garantir qu'au plus un dump ou une restauration tourne a la fois,
et exposer le libelle du job en cours ("manual-backup",
"restore:<nom>", "daily-backup").

Modele de concurrence:
----------------------
Le service tourne sur une seule boucle asyncio: le test-and-set de
try_acquire() ne contient aucun point de suspension (pas d'await),
donc deux coroutines ne peuvent pas l'entrelacer. Un threading.Lock
protege en plus la section critique, car le planificateur ou un
appelant synchrone peut toucher le garde depuis un thread.

Usage:
------
    guard = JobGuard()
    with guard.hold("manual-backup"):
        await service.create_backup(BackupType.MANUAL)
"""

import threading
from contextlib import contextmanager
from typing import Iterator, Optional

from src.domain.exceptions import JobConflictError


class JobGuard:
    """
    Slot unique: vide (idle) ou occupe par un libelle.

    Une instance par application, injectee par le conteneur.
    """

    def __init__(self) -> None:
        self._label: Optional[str] = None
        self._lock = threading.Lock()

    def try_acquire(self, label: str) -> bool:
        """
        Occupe le slot s'il est libre.

        Args:
            label: Description du job demarre.

        Returns:
            True si acquis, False si un autre job occupe deja le slot
            (l'etat n'est alors pas modifie).
        """
        return self._acquire(label) is None

    def release(self) -> None:
        """Libere le slot sans condition."""
        with self._lock:
            self._label = None

    @contextmanager
    def hold(self, label: str) -> Iterator[None]:
        """
        Occupe le slot pour la duree du bloc.

        Raises:
            JobConflictError: Si un job est deja en cours (porte son libelle).
        """
        current = self._acquire(label)
        if current is not None:
            raise JobConflictError(current)
        try:
            yield
        finally:
            self.release()

    @property
    def label(self) -> Optional[str]:
        """Libelle du job en cours, None si idle."""
        return self._label

    @property
    def is_busy(self) -> bool:
        """True si un job est en cours."""
        return self._label is not None

    def _acquire(self, label: str) -> Optional[str]:
        """Test-and-set; retourne le libelle occupant en cas de conflit."""
        with self._lock:
            if self._label is not None:
                return self._label
            self._label = label
            return None
