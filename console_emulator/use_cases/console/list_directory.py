"""
Use case for listing a directory (or describing a single file) for the ls built-in.
"""

import logging
import os
from typing import Optional

from console_emulator.entities.file_details import FileDetails
from console_emulator.exceptions import BaseConsoleError, FileInspectionError
from console_emulator.ports.files.filesystem_port import FileSystemPort
from console_emulator.use_cases.console.file_inspector import FileInspector


class ListDirectoryUseCase:
    """Use case for listing the entries at a canonical path."""

    def __init__(
        self,
        filesystem: FileSystemPort,
        inspector: FileInspector,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            filesystem: File system used to enumerate children
            inspector: Inspector used for permission checks and detail lines
            logger: Logger instance to use for logging
        """
        self._filesystem = filesystem
        self._inspector = inspector
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, target: str) -> list[FileDetails]:
        """
        Describe a path.

        Args:
            target: Canonical path of a directory or a file

        Returns:
            One FileDetails per immediate child (sorted by name) when target is a
            directory, otherwise a single FileDetails for target itself

        Raises:
            FileInspectionError: If target is missing, unreadable or cannot be listed
        """
        try:
            self._logger.info(f"Listing entries at: {target}")
            self._inspector.check_readable(target)
            if not self._inspector.is_directory(target):
                return [self._inspector.describe(target)]

            self._inspector.check_is_directory(target)
            children = sorted(
                self._filesystem.list_children(target), key=os.path.basename
            )
            details = self._describe_children(children)
            self._logger.info(f"Found {len(details)} entries")
            return details
        except FileInspectionError:
            raise
        except Exception as e:
            self._logger.error(f"Error listing entries: {e}")
            raise FileInspectionError(f"Failed to list {target}: {str(e)}")

    def _describe_children(self, children: list[str]) -> list[FileDetails]:
        details: list[FileDetails] = []
        for child in children:
            try:
                details.append(self._inspector.describe(child))
            except BaseConsoleError as e:
                # Entry vanished or became unreadable while listing; keep the rest
                self._logger.warning(f"Could not describe {child}: {e}")
                continue
        return details
