"""
Configuration et fixtures pytest.
"""

import asyncio
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Mapping, Optional, Sequence

import jwt
import pytest
from fastapi.testclient import TestClient

# Ajouter le repertoire racine au path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.domain.exceptions import OperatorStoreError
from src.domain.ports.command_runner import CommandRunner, ProcessResult
from src.domain.ports.operator_repository import OperatorRepository
from src.infrastructure.backup.config import BackupSettings
from src.infrastructure.container import Container
from src.presentation.api.config import APISettings
from src.presentation.api.main import create_app

TEST_SECRET = "test-secret-key-with-enough-entropy"
OPERATOR_ID = "6a1f0c9e-3b7d-4c55-9d2e-0f4b8a7c1e23"
FIXED_NOW = datetime(2026, 1, 1, 12, 0, 0)


# ═══════════════════════════════════════════════════════════════════════════════
# FAKES - PORTS
# ═══════════════════════════════════════════════════════════════════════════════

class FakeOperatorRepository(OperatorRepository):
    """Registre en memoire, enregistre chaque appel."""

    def __init__(self, privileged: Optional[set] = None, fail: bool = False):
        self.privileged = set(privileged or ())
        self.fail = fail
        self.calls: list[str] = []

    def is_privileged(self, subject: str) -> bool:
        self.calls.append(subject)
        if self.fail:
            raise OperatorStoreError("Database error")
        return subject in self.privileged


class RecordingCommandRunner(CommandRunner):
    """
    Espion du port CommandRunner: aucun processus n'est lance.

    Un pg_dump reussi ecrit un faux dump dans le fichier --file.
    `gate` permet de bloquer le processus jusqu'a ce que le test le libere.
    """

    def __init__(self, returncode: int = 0, stderr: str = "", spawn_error: Optional[str] = None):
        self.returncode = returncode
        self.stderr = stderr
        self.spawn_error = spawn_error
        self.calls: list[list[str]] = []
        self.envs: list[dict] = []
        self.gate: Optional[asyncio.Event] = None

    async def run(
        self,
        args: Sequence[str],
        env: Optional[Mapping[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> ProcessResult:
        args = list(args)
        self.calls.append(args)
        self.envs.append(dict(env or {}))
        if self.gate is not None:
            await self.gate.wait()

        if self.spawn_error is not None:
            return ProcessResult(args=args, spawn_error=self.spawn_error)

        if args[0] == "pg_dump" and "--file" in args:
            Path(args[args.index("--file") + 1]).write_bytes(b"PGDMP fake dump")

        return ProcessResult(args=args, returncode=self.returncode, stderr=self.stderr)

    @property
    def programs(self) -> list[str]:
        return [call[0] for call in self.calls]


# ═══════════════════════════════════════════════════════════════════════════════
# FIXTURES - CONFIGURATION
# ═══════════════════════════════════════════════════════════════════════════════

@pytest.fixture
def backup_dir(tmp_path: Path) -> Path:
    """Repertoire de stockage (non cree: le service doit le creer)."""
    return tmp_path / "backups"


@pytest.fixture
def backup_settings(backup_dir: Path) -> BackupSettings:
    """BackupSettings isolees de l'environnement."""
    return BackupSettings(
        _env_file=None,
        database_url="postgresql://backup:secret@db:5432/app",
        backup_dir=str(backup_dir),
    )


@pytest.fixture
def api_settings() -> APISettings:
    """APISettings isolees de l'environnement."""
    return APISettings(_env_file=None, jwt_secret=TEST_SECRET)


# ═══════════════════════════════════════════════════════════════════════════════
# FIXTURES - COMPOSANTS
# ═══════════════════════════════════════════════════════════════════════════════

@pytest.fixture
def runner() -> RecordingCommandRunner:
    """Runner espion qui reussit."""
    return RecordingCommandRunner()


@pytest.fixture
def operators() -> FakeOperatorRepository:
    """Registre contenant OPERATOR_ID."""
    return FakeOperatorRepository(privileged={OPERATOR_ID})


@pytest.fixture
def container(backup_settings, runner, operators) -> Container:
    """Conteneur avec fakes et horloge figee."""
    return Container.create(
        backup_settings,
        runner=runner,
        operators=operators,
        clock=lambda: FIXED_NOW,
    )


@pytest.fixture
def app(api_settings, container):
    """Application FastAPI de test (sans lifespan: scheduler arrete)."""
    return create_app(api_settings, container)


@pytest.fixture
def client(app) -> TestClient:
    """Client de test."""
    return TestClient(app)


# ═══════════════════════════════════════════════════════════════════════════════
# FIXTURES - TOKENS
# ═══════════════════════════════════════════════════════════════════════════════

def make_token(
    claims: Optional[dict] = None,
    secret: str = TEST_SECRET,
    expires_in: timedelta = timedelta(minutes=5),
    algorithm: str = "HS256",
) -> str:
    """Signe un token de test."""
    payload = {"sub": OPERATOR_ID, "exp": datetime.now(timezone.utc) + expires_in}
    payload.update(claims or {})
    return jwt.encode(payload, secret, algorithm=algorithm)


@pytest.fixture
def token_factory():
    """Factory de tokens signes (voir make_token)."""
    return make_token


@pytest.fixture
def operator_id() -> str:
    """Sujet present dans le registre."""
    return OPERATOR_ID


@pytest.fixture
def auth_headers() -> dict:
    """Headers d'un operateur privilegie."""
    return {"Authorization": f"Bearer {make_token()}"}


# ═══════════════════════════════════════════════════════════════════════════════
# MARKERS
# ═══════════════════════════════════════════════════════════════════════════════

def pytest_configure(config):
    """Configure les markers personnalises."""
    config.addinivalue_line("markers", "unit: Tests unitaires rapides")
    config.addinivalue_line("markers", "integration: Tests d'integration")
