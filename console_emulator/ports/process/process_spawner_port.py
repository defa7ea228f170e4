"""
Process spawner port and result type, independent of how processes are started.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class ProcessResult:
    """Outcome of a finished process."""

    exit_status: int
    output: str  # stdout and stderr interleaved


class ProcessSpawnerPort(ABC):
    """Port interface for running an OS process to completion."""

    @abstractmethod
    def spawn(self, argv: list[str], cwd: str) -> ProcessResult:
        """
        Run a process and block until it exits.

        Args:
            argv: Program and arguments, e.g. ['sh', '-c', 'ls -la']
            cwd: Working directory of the child process

        Returns:
            Exit status and combined stdout/stderr text

        Raises:
            ExternalExecutionError: If the process cannot be started or read
        """
        pass
