"""
Use case for checking and describing file system entries.
"""

import logging
import os
from typing import Optional

from console_emulator.entities.file_details import FileDetails
from console_emulator.exceptions import (
    PathNotADirectoryError,
    PathNotFoundError,
    PathNotReadableError,
)
from console_emulator.ports.files.filesystem_port import FileSystemPort


class FileInspector:
    """Permission checks and detail lines for canonical paths."""

    def __init__(
        self,
        filesystem: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._filesystem = filesystem
        self._logger = logger or logging.getLogger(__name__)

    def check_readable(self, path: str) -> None:
        """
        Verify that a path exists and can be read.

        Raises:
            PathNotFoundError: If nothing exists at the path
            PathNotReadableError: If the path exists but is not readable
        """
        if not self._filesystem.exists(path):
            raise PathNotFoundError(f"'{path}' does not exist.")
        if not self._filesystem.is_readable(path):
            raise PathNotReadableError(f"'{path}' is not readable.")

    def check_is_directory(self, path: str) -> None:
        """
        Verify that a path is a readable directory.

        Raises:
            PathNotFoundError: If nothing exists at the path
            PathNotReadableError: If the path exists but is not readable
            PathNotADirectoryError: If the path is not a directory
        """
        self.check_readable(path)
        if not self._filesystem.is_directory(path):
            raise PathNotADirectoryError(f"'{path}' is not a directory.")

    def is_directory(self, path: str) -> bool:
        return self._filesystem.is_directory(path)

    def describe(self, path: str) -> FileDetails:
        """
        Build the detail line of an entry.

        Args:
            path: Canonical path of an existing entry

        Returns:
            FileDetails with permission flags, size and base name

        Raises:
            FileInspectionError: If the size cannot be read
        """
        return FileDetails(
            readable=self._filesystem.is_readable(path),
            writable=self._filesystem.is_writable(path),
            executable=self._filesystem.is_executable(path),
            size=self._filesystem.size(path),
            name=os.path.basename(path),
        )
