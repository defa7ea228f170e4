"""
In-memory file system adapter, a deterministic stand-in for the local file system.
"""

import logging
import posixpath
from collections import deque
from dataclasses import dataclass
from typing import Optional

from typing_extensions import override

from console_emulator.exceptions import FileInspectionError, InvalidPathError
from console_emulator.ports.files.filesystem_port import FileSystemPort

DIRECTORY_SIZE = 4096
MAX_SYMLINK_HOPS = 40


@dataclass
class _Node:
    is_directory: bool
    size: int = 0
    readable: bool = True
    writable: bool = True
    executable: bool = False
    link_target: Optional[str] = None


def _components(path: str) -> list[str]:
    return [part for part in path.split("/") if part]


def _normalize(path: str) -> str:
    # posixpath.normpath keeps a leading '//', which would create a second root
    return "/" + "/".join(_components(posixpath.normpath(path)))


class InMemoryFileSystemAdapter(FileSystemPort):
    """
    POSIX-style file system kept in a dictionary of absolute paths.

    Entries carry explicit permission flags, so unreadable directories and
    symbolic link loops can be modelled without touching the real disk.
    """

    def __init__(self, logger: logging.Logger | None = None):
        self._logger: logging.Logger = logger or logging.getLogger(__name__)
        self._nodes: dict[str, _Node] = {
            "/": _Node(is_directory=True, size=DIRECTORY_SIZE, executable=True)
        }

    def add_directory(
        self,
        path: str,
        readable: bool = True,
        writable: bool = True,
        executable: bool = True,
    ) -> str:
        """
        Create a directory, along with any missing parents.

        Returns:
            The normalized path of the directory
        """
        normalized = _normalize(path)
        self._ensure_parents(normalized)
        self._nodes[normalized] = _Node(
            is_directory=True,
            size=DIRECTORY_SIZE,
            readable=readable,
            writable=writable,
            executable=executable,
        )
        return normalized

    def add_file(
        self,
        path: str,
        size: int = 0,
        readable: bool = True,
        writable: bool = True,
        executable: bool = False,
    ) -> str:
        """
        Create a regular file, along with any missing parent directories.

        Returns:
            The normalized path of the file
        """
        normalized = _normalize(path)
        self._ensure_parents(normalized)
        self._nodes[normalized] = _Node(
            is_directory=False,
            size=size,
            readable=readable,
            writable=writable,
            executable=executable,
        )
        return normalized

    def add_symlink(self, path: str, target: str) -> str:
        """
        Create a symbolic link at path pointing to target (absolute or relative).

        Returns:
            The normalized path of the link
        """
        normalized = _normalize(path)
        self._ensure_parents(normalized)
        self._nodes[normalized] = _Node(is_directory=False, link_target=target)
        return normalized

    def _ensure_parents(self, path: str) -> None:
        parent = posixpath.dirname(path)
        while parent not in self._nodes:
            self._nodes[parent] = _Node(
                is_directory=True, size=DIRECTORY_SIZE, executable=True
            )
            parent = posixpath.dirname(parent)

    def _find(self, path: str) -> Optional[_Node]:
        try:
            return self._nodes.get(self.canonicalize(path))
        except InvalidPathError:
            return None

    @override
    def exists(self, path: str) -> bool:
        return self._find(path) is not None

    @override
    def is_directory(self, path: str) -> bool:
        node = self._find(path)
        return node is not None and node.is_directory

    @override
    def is_readable(self, path: str) -> bool:
        node = self._find(path)
        return node is not None and node.readable

    @override
    def is_writable(self, path: str) -> bool:
        node = self._find(path)
        return node is not None and node.writable

    @override
    def is_executable(self, path: str) -> bool:
        node = self._find(path)
        return node is not None and node.executable

    @override
    def size(self, path: str) -> int:
        node = self._find(path)
        if node is None:
            raise FileInspectionError(f"Cannot get size of '{path}': No such file or directory")
        return node.size

    @override
    def list_children(self, directory: str) -> list[str]:
        canonical = self.canonicalize(directory)
        node = self._nodes.get(canonical)
        if node is None or not node.is_directory:
            raise FileInspectionError(f"Cannot list '{directory}': Not a directory")
        if not node.readable:
            raise FileInspectionError(f"Cannot list '{directory}': Permission denied")
        return [
            path
            for path in self._nodes
            if path != "/" and posixpath.dirname(path) == canonical
        ]

    @override
    def canonicalize(self, path: str) -> str:
        """
        Resolve '.', '..' and symbolic links component by component.

        Raises:
            InvalidPathError: If the path is relative, contains a NUL byte or
                loops through too many symbolic links
        """
        if "\0" in path:
            raise InvalidPathError(f"Cannot resolve '{path}': embedded null byte")
        if not path.startswith("/"):
            raise InvalidPathError(f"Cannot resolve '{path}': not an absolute path")

        pending = deque(_components(path))
        resolved: list[str] = []
        hops = 0
        while pending:
            part = pending.popleft()
            if part == ".":
                continue
            if part == "..":
                if resolved:
                    resolved.pop()
                continue

            node = self._nodes.get("/" + "/".join(resolved + [part]))
            if node is not None and node.link_target is not None:
                hops += 1
                if hops > MAX_SYMLINK_HOPS:
                    raise InvalidPathError(
                        f"Cannot resolve '{path}': too many levels of symbolic links"
                    )
                if node.link_target.startswith("/"):
                    resolved = []
                pending.extendleft(reversed(_components(node.link_target)))
                continue

            resolved.append(part)

        return "/" + "/".join(resolved)
