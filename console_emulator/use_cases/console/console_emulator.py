"""
Command dispatcher: the engine behind one emulated console.
"""

import logging
import os
from typing import Callable, NamedTuple, Optional

from console_emulator.entities.command import CommandInvocation
from console_emulator.entities.history_buffer import HistoryBuffer
from console_emulator.entities.session import DEFAULT_HOST, Session, validate_user
from console_emulator.exceptions import (
    BaseConsoleError,
    ConsoleInitializationError,
    InvalidArgumentsError,
)
from console_emulator.use_cases.console.external_process_runner import (
    ExternalProcessRunner,
)
from console_emulator.use_cases.console.file_inspector import FileInspector
from console_emulator.use_cases.console.list_directory import ListDirectoryUseCase
from console_emulator.use_cases.console.path_resolver import PathResolver

QUOTE_CHARACTERS = ("'", '"')


class Builtin(NamedTuple):
    """A command handled by the console itself."""

    handler: Callable[..., str]
    arg_counts: tuple[int, ...]
    usage: str


class ConsoleEmulator:
    """
    A single emulated console.

    Keeps the session (user and working directory) and a bounded history of
    prompts and outputs. Each command line is either handled by a built-in or
    handed to an OS shell as a whole.

    Not safe for concurrent use: callers must serialize calls to execute().
    """

    def __init__(
        self,
        user: str,
        buffer_size: int,
        root_directory: str,
        path_resolver: PathResolver,
        file_inspector: FileInspector,
        list_directory: ListDirectoryUseCase,
        process_runner: ExternalProcessRunner,
        host: str = DEFAULT_HOST,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Create a console rooted at root_directory.

        Args:
            user: Name of the user typing commands. Must be non-empty.
            buffer_size: Capacity of the history buffer. Must be >= 1.
            root_directory: Initial working directory
            path_resolver: Resolves locations against the working directory
            file_inspector: Permission checks for cd and ls
            list_directory: Produces ls detail lines
            process_runner: Runs commands that are not built-ins
            host: Host token shown in the prompt
            logger: Logger instance to use for logging

        Raises:
            ValueError: If user is empty or buffer_size < 1
            ConsoleInitializationError: If root_directory is not a readable directory
        """
        self._logger = logger or logging.getLogger(__name__)
        self._path_resolver = path_resolver
        self._file_inspector = file_inspector
        self._list_directory = list_directory
        self._process_runner = process_runner
        self._buffer = HistoryBuffer(buffer_size)

        try:
            directory = path_resolver.resolve(root_directory, os.sep)
            file_inspector.check_is_directory(directory)
        except BaseConsoleError as e:
            self._logger.error(f"Unable to create console in {root_directory}: {e}")
            raise ConsoleInitializationError(f"Unable to create console: {e}") from e

        self._session = Session(user, directory, host)
        self._builtins: dict[str, Builtin] = {
            "cd": Builtin(self._change_directory, (1,), "Usage: cd <directory>"),
            "ls": Builtin(self._list, (0, 1), "Usage: ls [location]"),
            "pwd": Builtin(self._print_working_directory, (0,), "Usage: pwd"),
            "whoami": Builtin(self._whoami, (0,), "Usage: whoami"),
            "echo": Builtin(self._echo, (1,), 'Usage: echo "<text>"'),
            "clear": Builtin(self._clear, (0,), "Usage: clear"),
        }
        self._logger.info(f"Console created: {self._session}")

    @property
    def user(self) -> str:
        return self._session.user

    @property
    def current_directory(self) -> str:
        return self._session.current_directory

    @property
    def prompt(self) -> str:
        return self._session.prompt

    @property
    def history(self) -> tuple[str, ...]:
        return self._buffer.entries()

    @property
    def history_capacity(self) -> int:
        return self._buffer.capacity

    def set_user(self, user: str) -> None:
        """
        Replace the session user.

        Raises:
            ValueError: If user is not a non-empty string
        """
        self._session.user = validate_user(user)
        self._logger.info(f"User changed to {user}")

    def execute(self, command_line: str) -> str:
        """
        Execute one command line.

        The prompt and the command are recorded in the history before the
        command runs; the output follows as a separate entry unless it is blank.
        A blank line does nothing beyond recording the prompt.

        Args:
            command_line: Line typed by the user. Cannot be None.

        Returns:
            The command's output, usage message or "Error: ..." text. Never None.

        Raises:
            TypeError: If command_line is None
        """
        if command_line is None:
            raise TypeError("command_line cannot be None")

        self._buffer.append(self.prompt + command_line)

        invocation = CommandInvocation.parse(command_line)
        result = "" if invocation.is_blank else self._dispatch(invocation, command_line)

        if result.strip():
            self._buffer.append(result)
        return result

    def get_content(self) -> str:
        """
        Render the history followed by the current prompt.

        Example::

            user@android:/root$ pwd
            /root
            user@android:/root$ cd ..
            user@android:/$

        Returns:
            One line per history entry, then the prompt awaiting input
        """
        return "".join(f"{entry}\n" for entry in self._buffer) + self.prompt

    def _dispatch(self, invocation: CommandInvocation, command_line: str) -> str:
        builtin = self._builtins.get(invocation.name)
        try:
            if builtin is None:
                return self._process_runner.run(command_line, self.current_directory)

            self._logger.info(f"Running built-in {invocation.name} {list(invocation.args)}")
            if invocation.arg_count not in builtin.arg_counts:
                raise InvalidArgumentsError(builtin.usage)
            return builtin.handler(*invocation.args)
        except InvalidArgumentsError as e:
            return e.usage
        except BaseConsoleError as e:
            self._logger.warning(f"{invocation.name} failed: {e}")
            return f"Error: {e}"
        except Exception as e:
            self._logger.exception(f"Unexpected error in {invocation.name}")
            return f"Error: {e}"

    def _change_directory(self, location: str) -> str:
        directory = self._path_resolver.resolve(location, self.current_directory)
        self._file_inspector.check_is_directory(directory)
        self._session.current_directory = directory
        self._logger.info(f"Working directory changed to {directory}")
        return ""

    def _list(self, location: Optional[str] = None) -> str:
        target = self.current_directory
        if location is not None:
            target = self._path_resolver.resolve(location, self.current_directory)
        return "\n".join(str(details) for details in self._list_directory.execute(target))

    def _print_working_directory(self) -> str:
        return self.current_directory

    def _whoami(self) -> str:
        return self.user

    def _echo(self, text: str) -> str:
        if len(text) < 2 or text[0] not in QUOTE_CHARACTERS or text[-1] != text[0]:
            raise InvalidArgumentsError(self._builtins["echo"].usage)
        return text[1:-1]

    def _clear(self) -> str:
        self._buffer.clear()
        return ""
