"""
Port CommandRunner - Execution de processus externes.

Responsabilite unique:
----------------------
Lancer un utilitaire externe (pg_dump, pg_restore), attendre sa fin
sans bloquer la boucle, et retourner un ProcessResult. Les echecs
(code retour non nul, lancement impossible, timeout) sont des VALEURS
du resultat, pas des exceptions: l'appelant les traduit lui-meme en
BackupFailedError / RestoreFailedError.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence


@dataclass
class ProcessResult:
    """
    Resultat d'un processus externe.

    Attributes:
        args: Ligne de commande executee.
        returncode: Code retour (None si le processus n'a pas demarre).
        stdout: Sortie standard capturee.
        stderr: Sortie d'erreur capturee.
        duration_seconds: Duree d'execution.
        spawn_error: Message si le lancement a echoue.
        timed_out: True si le processus a ete tue apres le timeout.
    """

    args: Sequence[str]
    returncode: Optional[int] = None
    stdout: str = ""
    stderr: str = ""
    duration_seconds: float = 0.0
    spawn_error: Optional[str] = None
    timed_out: bool = False

    @property
    def ok(self) -> bool:
        """True si le processus s'est termine avec le code 0."""
        return (
            self.spawn_error is None
            and not self.timed_out
            and self.returncode == 0
        )

    @property
    def program(self) -> str:
        """Nom de l'executable."""
        return self.args[0] if self.args else ""

    def describe_failure(self) -> str:
        """Message d'erreur lisible pour l'operateur."""
        if self.spawn_error is not None:
            return f"{self.program} could not be started: {self.spawn_error}"
        if self.timed_out:
            return f"{self.program} timed out after {self.duration_seconds:.0f}s"
        detail = self.stderr.strip() or self.stdout.strip()
        message = f"{self.program} exited with code {self.returncode}"
        return f"{message}: {detail}" if detail else message


class CommandRunner(ABC):
    """
    Interface pour l'execution de commandes.

    Les implementations possibles:
    - AsyncioCommandRunner: Production (asyncio.create_subprocess_exec)
    - RecordingCommandRunner: Tests (espion, aucun processus lance)
    """

    @abstractmethod
    async def run(
        self,
        args: Sequence[str],
        env: Optional[Mapping[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> ProcessResult:
        """
        Execute une commande et attend sa fin.

        Args:
            args: Executable et arguments (jamais via un shell).
            env: Variables ajoutees a l'environnement du process (ex: PGPASSWORD).
            timeout: Duree max en secondes (None: illimite).

        Returns:
            ProcessResult decrivant l'issue.
        """
        ...
