"""
AsyncioCommandRunner - Adapter asyncio du port CommandRunner.

Responsabilite unique:
----------------------
Lancer pg_dump / pg_restore via asyncio.create_subprocess_exec
(jamais via un shell), capturer stdout/stderr et attendre la fin
sans occuper de thread dedie.

Timeout et annulation:
----------------------
Sans timeout, le processus tourne jusqu'a sa fin. Avec un timeout,
il est tue (SIGKILL) et le resultat porte timed_out=True. Si la tache
appelante est annulee, le processus est tue et attendu avant que
CancelledError ne remonte: aucun pg_dump ne survit a son job.
"""

import asyncio
import contextlib
import os
import time
from typing import Mapping, Optional, Sequence

from src.domain.ports.command_runner import CommandRunner, ProcessResult
from src.infrastructure.logging import get_logger

logger = get_logger(__name__)


class AsyncioCommandRunner(CommandRunner):
    """Execute les commandes dans des sous-processus asyncio."""

    async def run(
        self,
        args: Sequence[str],
        env: Optional[Mapping[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> ProcessResult:
        """
        Execute une commande et attend sa fin.

        Args:
            args: Executable et arguments.
            env: Variables ajoutees a os.environ (PGPASSWORD, PGAPPNAME).
            timeout: Duree max en secondes (None: illimite).

        Returns:
            ProcessResult (jamais d'exception pour un echec du processus).
        """
        args = list(args)
        start_time = time.perf_counter()

        try:
            process = await asyncio.create_subprocess_exec(
                *args,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                env={**os.environ, **(env or {})},
            )
        except OSError as e:
            logger.error("process_spawn_failed", program=args[0], error=str(e))
            return ProcessResult(
                args=args,
                spawn_error=str(e),
                duration_seconds=time.perf_counter() - start_time,
            )

        timed_out = False
        try:
            stdout, stderr = await asyncio.wait_for(process.communicate(), timeout)
        except asyncio.TimeoutError:
            timed_out = True
            _kill(process)
            stdout, stderr = await process.communicate()
        except asyncio.CancelledError:
            logger.warning("process_cancelled", program=args[0], pid=process.pid)
            _kill(process)
            await asyncio.shield(process.wait())
            raise

        return ProcessResult(
            args=args,
            returncode=process.returncode,
            stdout=stdout.decode(errors="replace"),
            stderr=stderr.decode(errors="replace"),
            duration_seconds=time.perf_counter() - start_time,
            timed_out=timed_out,
        )


def _kill(process: asyncio.subprocess.Process) -> None:
    """SIGKILL, sans erreur si le processus vient de se terminer."""
    if process.returncode is None:
        with contextlib.suppress(ProcessLookupError):
            process.kill()
