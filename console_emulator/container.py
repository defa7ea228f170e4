"""
Dependency injection container for managing console dependencies.
"""

import logging
import threading
from typing import Optional

from console_emulator.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from console_emulator.adapters.process.local_process_spawner import LocalProcessSpawner
from console_emulator.config.settings import Settings, settings
from console_emulator.ports.files.filesystem_port import FileSystemPort
from console_emulator.ports.process.process_spawner_port import ProcessSpawnerPort
from console_emulator.use_cases.console.console_emulator import ConsoleEmulator
from console_emulator.use_cases.console.external_process_runner import (
    ExternalProcessRunner,
)
from console_emulator.use_cases.console.file_inspector import FileInspector
from console_emulator.use_cases.console.list_directory import ListDirectoryUseCase
from console_emulator.use_cases.console.path_resolver import PathResolver


class DependencyContainer:
    """
    Container for managing console dependencies using dependency injection.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._instances = {}
        self._settings = settings
        self._logger = logging.getLogger(__name__)
        self._console_lock = threading.Lock()

    def get_settings(self) -> Settings:
        """
        Get the settings, defaulting to the ones loaded from the environment.

        Returns:
            Settings instance
        """
        return self._settings or settings

    def get_filesystem(self) -> FileSystemPort:
        """
        Get file system adapter instance.

        Returns:
            FileSystemPort implementation
        """
        if "filesystem" not in self._instances:
            self._instances["filesystem"] = LocalFileSystemAdapter(self._logger)
        return self._instances["filesystem"]

    def get_process_spawner(self) -> ProcessSpawnerPort:
        """
        Get process spawner instance.

        Returns:
            ProcessSpawnerPort implementation
        """
        if "process_spawner" not in self._instances:
            self._instances["process_spawner"] = LocalProcessSpawner(self._logger)
        return self._instances["process_spawner"]

    def get_path_resolver(self) -> PathResolver:
        if "path_resolver" not in self._instances:
            self._instances["path_resolver"] = PathResolver(
                self.get_filesystem(), self._logger
            )
        return self._instances["path_resolver"]

    def get_file_inspector(self) -> FileInspector:
        if "file_inspector" not in self._instances:
            self._instances["file_inspector"] = FileInspector(
                self.get_filesystem(), self._logger
            )
        return self._instances["file_inspector"]

    def get_list_directory_use_case(self) -> ListDirectoryUseCase:
        """
        Get list directory use case with injected dependencies.

        Returns:
            Configured ListDirectoryUseCase
        """
        if "list_directory_use_case" not in self._instances:
            self._instances["list_directory_use_case"] = ListDirectoryUseCase(
                self.get_filesystem(), self.get_file_inspector(), self._logger
            )
        return self._instances["list_directory_use_case"]

    def get_process_runner(self) -> ExternalProcessRunner:
        """
        Get external process runner with injected dependencies.

        Returns:
            Configured ExternalProcessRunner
        """
        if "process_runner" not in self._instances:
            self._instances["process_runner"] = ExternalProcessRunner(
                self.get_process_spawner(),
                shell=self.get_settings().shell,
                logger=self._logger,
            )
        return self._instances["process_runner"]

    def create_console(
        self,
        user: Optional[str] = None,
        buffer_size: Optional[int] = None,
        root_directory: Optional[str] = None,
    ) -> ConsoleEmulator:
        """
        Build a new console, falling back to the settings for omitted values.

        Raises:
            ConsoleInitializationError: If the root directory is not usable
        """
        config = self.get_settings()
        return ConsoleEmulator(
            user=config.user if user is None else user,
            buffer_size=config.buffer_size if buffer_size is None else buffer_size,
            root_directory=(
                config.root_directory if root_directory is None else root_directory
            ),
            path_resolver=self.get_path_resolver(),
            file_inspector=self.get_file_inspector(),
            list_directory=self.get_list_directory_use_case(),
            process_runner=self.get_process_runner(),
            host=config.host,
            logger=self._logger,
        )

    def get_console(self) -> ConsoleEmulator:
        """
        Get the shared console session.

        Returns:
            ConsoleEmulator configured from the settings
        """
        if "console" not in self._instances:
            self._instances["console"] = self.create_console()
        return self._instances["console"]

    def get_console_lock(self) -> threading.Lock:
        """Lock serializing access to the shared console from concurrent callers."""
        return self._console_lock

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
