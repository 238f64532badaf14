"""
Tests unitaires pour le JobGuard.
"""

import threading

import pytest

from src.domain.exceptions import JobConflictError
from src.domain.services.job_guard import JobGuard


class TestJobGuard:
    """Tests pour l'exclusion mutuelle des jobs."""

    def test_starts_idle(self):
        """Un garde neuf est libre."""
        guard = JobGuard()

        assert guard.is_busy is False
        assert guard.label is None

    def test_try_acquire_when_idle(self):
        """try_acquire occupe un slot libre."""
        guard = JobGuard()

        assert guard.try_acquire("manual-backup") is True
        assert guard.is_busy is True
        assert guard.label == "manual-backup"

    def test_try_acquire_when_busy_keeps_label(self):
        """Un second try_acquire echoue sans modifier le libelle."""
        guard = JobGuard()
        guard.try_acquire("daily-backup")

        assert guard.try_acquire("manual-backup") is False
        assert guard.label == "daily-backup"

    def test_release_frees_slot(self):
        """release remet le garde a l'etat libre."""
        guard = JobGuard()
        guard.try_acquire("restore:a.dump")

        guard.release()

        assert guard.is_busy is False
        assert guard.try_acquire("manual-backup") is True

    def test_release_when_idle_is_noop(self):
        """release sur un garde libre ne leve pas."""
        guard = JobGuard()

        guard.release()

        assert guard.is_busy is False

    def test_hold_sets_label_inside_block(self):
        """hold occupe le slot pendant le bloc puis le libere."""
        guard = JobGuard()

        with guard.hold("manual-backup"):
            assert guard.label == "manual-backup"

        assert guard.is_busy is False

    def test_hold_releases_on_exception(self):
        """hold libere le slot meme si le bloc leve."""
        guard = JobGuard()

        with pytest.raises(RuntimeError):
            with guard.hold("manual-backup"):
                raise RuntimeError("boom")

        assert guard.is_busy is False

    def test_hold_conflict_carries_running_label(self):
        """hold leve JobConflictError avec le libelle du job en cours."""
        guard = JobGuard()
        guard.try_acquire("daily-backup")

        with pytest.raises(JobConflictError) as exc_info:
            with guard.hold("restore:x.dump"):
                pass

        assert exc_info.value.label == "daily-backup"
        assert exc_info.value.message == "Backup job already running: daily-backup"
        # Le conflit ne libere pas le job en cours
        assert guard.label == "daily-backup"

    def test_single_winner_across_threads(self):
        """Un seul thread obtient le slot."""
        guard = JobGuard()
        barrier = threading.Barrier(8)
        results = []

        def contend(i):
            barrier.wait()
            results.append(guard.try_acquire(f"job-{i}"))

        threads = [threading.Thread(target=contend, args=(i,)) for i in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results.count(True) == 1
        assert guard.is_busy is True
