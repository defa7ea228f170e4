"""
Use case for running command lines the console does not handle itself.
"""

import logging
from typing import Optional

from console_emulator.exceptions import ExternalExecutionError
from console_emulator.ports.process.process_spawner_port import ProcessSpawnerPort

DEFAULT_SHELL = "sh"


def strip_trailing_newline(text: str) -> str:
    """Drop a single trailing line break ('\\n' or '\\r\\n')."""
    if text.endswith("\r\n"):
        return text[:-2]
    if text.endswith("\n"):
        return text[:-1]
    return text


class ExternalProcessRunner:
    """Hands whole command lines to an OS shell and collects what it prints."""

    def __init__(
        self,
        spawner: ProcessSpawnerPort,
        shell: str = DEFAULT_SHELL,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._spawner = spawner
        self._shell = shell or DEFAULT_SHELL
        self._logger = logger or logging.getLogger(__name__)

    @property
    def shell(self) -> str:
        return self._shell

    def run(self, command_line: str, working_directory: str) -> str:
        """
        Run a command line through the shell and block until it exits.

        A non-zero exit status is not treated as a failure; whatever the
        process printed is returned.

        Args:
            command_line: Entire line as typed by the user
            working_directory: Directory the shell starts in

        Returns:
            Combined stdout/stderr with one trailing newline removed, or
            "Error: <message>" when the shell cannot be run
        """
        argv = [self._shell, "-c", command_line]
        try:
            self._logger.info(f"Running external command in {working_directory}: {command_line}")
            result = self._spawner.spawn(argv, working_directory)
        except (ExternalExecutionError, OSError) as e:
            self._logger.warning(f"External command failed: {e}")
            return f"Error: {e}"

        self._logger.debug(f"External command exited with status {result.exit_status}")
        return strip_trailing_newline(result.output)
