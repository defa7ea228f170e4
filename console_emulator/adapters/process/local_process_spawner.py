import logging
import subprocess
from typing import Optional

from typing_extensions import override

from console_emulator.exceptions import ExternalExecutionError
from console_emulator.ports.process.process_spawner_port import (
    ProcessResult,
    ProcessSpawnerPort,
)


class LocalProcessSpawner(ProcessSpawnerPort):
    """Runs processes on the local machine with subprocess."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger(__name__)

    @override
    def spawn(self, argv: list[str], cwd: str) -> ProcessResult:
        try:
            # stderr is merged into stdout in arrival order.
            # The child never sees our stdin.
            completed = subprocess.run(
                argv,
                cwd=cwd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
            )
        except (OSError, ValueError, subprocess.SubprocessError) as e:
            # ValueError: argv or cwd containing a NUL byte
            self._logger.error(f"Failed to run {argv!r} in {cwd}: {e}")
            raise ExternalExecutionError(f"Cannot run '{argv[0]}': {e}")

        output = completed.stdout.decode("utf-8", errors="replace")
        self._logger.debug(
            f"Process {argv!r} exited with status {completed.returncode}"
        )
        return ProcessResult(exit_status=completed.returncode, output=output)
