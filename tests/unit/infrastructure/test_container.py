"""
Tests unitaires pour le conteneur d'injection de dependances.
"""

from unittest.mock import MagicMock

import pytest

from src.infrastructure.backup.process import AsyncioCommandRunner
from src.infrastructure.container import Container, get_container, reset_container
from src.infrastructure.persistence.operator_repository import SqlAlchemyOperatorRepository


class TestContainer:
    """Tests pour Container.create."""

    def test_components_share_guard(self, container):
        """Les jobs, l'API et le scheduler partagent le meme garde."""
        assert container.jobs._guard is container.guard
        assert container.scheduler._jobs is container.jobs

    def test_store_uses_backup_dir(self, container, backup_dir):
        """L'inventaire pointe sur BACKUP_DIR."""
        assert container.store.directory == backup_dir

    def test_injected_operators_skip_database(self, container, operators):
        """Un registre injecte ne cree pas de pool de connexions."""
        assert container.operators is operators
        assert container.db_manager is None

    def test_defaults_build_real_adapters(self, backup_settings):
        """Sans injection, les adapters reels sont construits."""
        container = Container.create(backup_settings)

        assert isinstance(container.service._runner, AsyncioCommandRunner)
        assert isinstance(container.operators, SqlAlchemyOperatorRepository)
        assert container.db_manager is not None
        container.close()

    def test_close_stops_scheduler_and_disposes_pool(self, container):
        """close() arrete le scheduler et libere la base."""
        container.scheduler = MagicMock()
        container.db_manager = MagicMock()

        container.close()

        container.scheduler.stop.assert_called_once()
        container.db_manager.dispose.assert_called_once()


class TestGlobalContainer:
    """Tests pour le singleton du processus."""

    @pytest.fixture(autouse=True)
    def _reset(self):
        reset_container()
        yield
        reset_container()

    def test_get_container_is_singleton(self, monkeypatch, backup_settings):
        """get_container retourne toujours la meme instance."""
        monkeypatch.setattr(
            "src.infrastructure.container.get_backup_settings", lambda: backup_settings
        )

        first = get_container()

        assert get_container() is first
        first.close()
