"""
Pytest configuration and shared fixtures.
"""

import os
import tempfile
from unittest.mock import MagicMock

import pytest

from console_emulator.adapters.files.in_memory_fs_adapter import (
    InMemoryFileSystemAdapter,
)
from console_emulator.container import DependencyContainer
from console_emulator.ports.process.process_spawner_port import (
    ProcessResult,
    ProcessSpawnerPort,
)
from console_emulator.use_cases.console.console_emulator import ConsoleEmulator
from console_emulator.use_cases.console.external_process_runner import (
    ExternalProcessRunner,
)
from console_emulator.use_cases.console.file_inspector import FileInspector
from console_emulator.use_cases.console.list_directory import ListDirectoryUseCase
from console_emulator.use_cases.console.path_resolver import PathResolver


@pytest.fixture
def temp_directory():
    """
    Real directory laid out as::

        notes.txt          ("remember the milk\\n", 18 bytes)
        run.sh             (shell script)
        docs/readme.md

    Returns:
        Canonical path to the temporary directory
    """
    layout = {
        "notes.txt": "remember the milk\n",
        "run.sh": "#!/bin/sh\necho hi\n",
        os.path.join("docs", "readme.md"): "# Docs\n",
    }
    with tempfile.TemporaryDirectory() as temp_dir:
        for relative, text in layout.items():
            path = os.path.join(temp_dir, relative)
            os.makedirs(os.path.dirname(path), exist_ok=True)
            with open(path, "w") as f:
                f.write(text)

        # macOS puts temp dirs behind /var -> /private/var
        yield os.path.realpath(temp_dir)


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def memory_fs():
    """
    In-memory file system laid out as::

        /root/             (readable directory)
        /root/sub/         (readable directory)
        /root/sub/a.txt    (5 bytes)
        /root/notes.txt    (42 bytes, rw-)
        /root/run.sh       (10 bytes, r-x)
        /root/locked/      (unreadable directory)
        /root/link -> sub  (symlink)
    """
    fs = InMemoryFileSystemAdapter()
    fs.add_directory("/root")
    fs.add_directory("/root/sub")
    fs.add_file("/root/sub/a.txt", size=5)
    fs.add_file("/root/notes.txt", size=42)
    fs.add_file("/root/run.sh", size=10, writable=False, executable=True)
    fs.add_directory("/root/locked", readable=False)
    fs.add_symlink("/root/link", "sub")
    return fs


@pytest.fixture
def mock_spawner():
    """
    Process spawner mock that reports a successful, silent process.

    Returns:
        MagicMock implementing ProcessSpawnerPort
    """
    spawner = MagicMock(spec=ProcessSpawnerPort)
    spawner.spawn.return_value = ProcessResult(exit_status=0, output="")
    return spawner


@pytest.fixture
def make_console(memory_fs, mock_spawner, mock_logger):
    """
    Factory building a ConsoleEmulator over the in-memory file system.

    Returns:
        Callable(user="alice", buffer_size=10, root_directory="/root") -> ConsoleEmulator
    """

    def _make(user="alice", buffer_size=10, root_directory="/root"):
        inspector = FileInspector(memory_fs, mock_logger)
        return ConsoleEmulator(
            user=user,
            buffer_size=buffer_size,
            root_directory=root_directory,
            path_resolver=PathResolver(memory_fs, mock_logger),
            file_inspector=inspector,
            list_directory=ListDirectoryUseCase(memory_fs, inspector, mock_logger),
            process_runner=ExternalProcessRunner(mock_spawner, logger=mock_logger),
            logger=mock_logger,
        )

    return _make


@pytest.fixture
def dependency_container(mock_logger):
    """
    Create a dependency container with mocked dependencies for testing.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer()
    # Replace the logger with our mock
    container._logger = mock_logger
    return container
