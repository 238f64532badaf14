"""
Ports du domaine (Hexagonal Architecture).

Les Ports sont des interfaces qui definissent les contrats
entre le domaine et le monde exterieur.

Ports disponibles:
------------------
- OperatorRepository: Registre des operateurs privilegies
- CommandRunner: Execution des utilitaires de dump/restauration

Pattern:
--------
Les Ports sont des ABC implementees par des Adapters dans la
couche Infrastructure, et remplacees par des fakes dans les tests.
"""

from src.domain.ports.command_runner import CommandRunner, ProcessResult
from src.domain.ports.operator_repository import OperatorRepository

__all__ = [
    "CommandRunner",
    "OperatorRepository",
    "ProcessResult",
]
