"""
Use case for turning a user-supplied location into a canonical absolute path.
"""

import logging
import os
from typing import Optional

from console_emulator.exceptions import InvalidPathError
from console_emulator.ports.files.filesystem_port import FileSystemPort


class PathResolver:
    """Resolves locations against a base directory."""

    def __init__(
        self,
        filesystem: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the resolver.

        Args:
            filesystem: File system used to canonicalize paths
            logger: Logger instance to use for logging
        """
        self._filesystem = filesystem
        self._logger = logger or logging.getLogger(__name__)

    def resolve(self, location: str, base: str) -> str:
        """
        Resolve a location to a canonical absolute path.

        Absolute locations ignore the base; relative ones are joined to it
        first. The result is not checked for existence.

        Args:
            location: Path typed by the user, absolute or relative
            base: Absolute directory relative locations are resolved against

        Returns:
            Canonical absolute path

        Raises:
            InvalidPathError: If canonicalization cannot complete
        """
        if os.path.isabs(location):
            candidate = location
        else:
            candidate = os.path.join(base, location)

        try:
            canonical = self._filesystem.canonicalize(candidate)
        except InvalidPathError:
            raise
        except Exception as e:
            self._logger.error(f"Error resolving {candidate}: {e}")
            raise InvalidPathError(f"Cannot resolve '{candidate}': {str(e)}")

        self._logger.debug(f"Resolved '{location}' against {base} to {canonical}")
        return canonical
