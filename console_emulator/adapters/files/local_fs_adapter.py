"""
Local file system adapter implementation of the file system port.
"""

import logging
import os

from typing_extensions import override

from console_emulator.exceptions import FileInspectionError, InvalidPathError
from console_emulator.ports.files.filesystem_port import FileSystemPort


class LocalFileSystemAdapter(FileSystemPort):
    """Local file system implementation of the file system port."""

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    @override
    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    @override
    def is_directory(self, path: str) -> bool:
        return os.path.isdir(path)

    @override
    def is_readable(self, path: str) -> bool:
        return os.access(path, os.R_OK)

    @override
    def is_writable(self, path: str) -> bool:
        return os.access(path, os.W_OK)

    @override
    def is_executable(self, path: str) -> bool:
        return os.access(path, os.X_OK)

    @override
    def size(self, path: str) -> int:
        """
        Size of the entry in bytes, as reported by stat.

        Raises:
            FileInspectionError: If the entry cannot be stat'ed
        """
        try:
            return os.path.getsize(path)
        except OSError as e:
            raise FileInspectionError(f"Cannot get size of '{path}': {e.strerror or e}")

    @override
    def list_children(self, directory: str) -> list[str]:
        """
        List the immediate children of a directory.

        Raises:
            FileInspectionError: If listing fails
        """
        try:
            return [os.path.join(directory, item) for item in os.listdir(directory)]
        except OSError as e:
            self._logger.warning(f"Could not list directory {directory}: {e}")
            raise FileInspectionError(
                f"Cannot list '{directory}': {e.strerror or e}"
            )

    @override
    def canonicalize(self, path: str) -> str:
        """
        Canonicalize a path with os.path.realpath.

        Raises:
            InvalidPathError: If the path cannot be resolved (e.g. embedded NUL, I/O error)
        """
        try:
            return os.path.realpath(path)
        except (OSError, ValueError) as e:
            raise InvalidPathError(f"Cannot resolve '{path}': {e}")
