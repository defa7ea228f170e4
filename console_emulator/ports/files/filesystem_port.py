"""
File system port interface defining the capabilities the console needs from a file system.
"""

from abc import ABC, abstractmethod


class FileSystemPort(ABC):
    """Port interface for file system queries."""

    @abstractmethod
    def exists(self, path: str) -> bool:
        """
        Check whether a path exists.

        Args:
            path: Absolute path to check

        Returns:
            True if something exists at the path
        """
        pass

    @abstractmethod
    def is_directory(self, path: str) -> bool:
        """
        Check whether a path is a directory.

        Args:
            path: Absolute path to check

        Returns:
            True if the path exists and is a directory
        """
        pass

    @abstractmethod
    def is_readable(self, path: str) -> bool:
        """Check whether the current process may read the path."""
        pass

    @abstractmethod
    def is_writable(self, path: str) -> bool:
        """Check whether the current process may write the path."""
        pass

    @abstractmethod
    def is_executable(self, path: str) -> bool:
        """Check whether the current process may execute (or traverse) the path."""
        pass

    @abstractmethod
    def size(self, path: str) -> int:
        """
        Size of the entry in bytes.

        Args:
            path: Absolute path of an existing entry

        Returns:
            Non-negative size in bytes

        Raises:
            FileInspectionError: If the size cannot be read
        """
        pass

    @abstractmethod
    def list_children(self, directory: str) -> list[str]:
        """
        List the immediate children of a directory.

        Args:
            directory: Absolute path of a readable directory

        Returns:
            Absolute paths of the children, in no particular order

        Raises:
            FileInspectionError: If the directory cannot be listed
        """
        pass

    @abstractmethod
    def canonicalize(self, path: str) -> str:
        """
        Resolve '.', '..' and symbolic links into a unique absolute path.

        The path does not need to exist.

        Args:
            path: Absolute path to canonicalize

        Returns:
            Canonical absolute path

        Raises:
            InvalidPathError: If canonicalization cannot complete
        """
        pass
