"""
File details domain entity.
"""

from dataclasses import dataclass

# Wide enough to align sizes up to 9,999,999,999,999 bytes.
SIZE_COLUMN_WIDTH = 13


@dataclass(frozen=True)
class FileDetails:
    """
    Permission and size summary of a single file system entry, rendered as one
    ``ls`` line.
    """

    readable: bool
    writable: bool
    executable: bool
    size: int
    name: str

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ValueError(f"size must be non-negative, got {self.size}")

    @property
    def permissions(self) -> str:
        """
        Three-character permission shorthand, e.g. ``r-x``.

        Returns:
            Read, write and execute flags, with '-' for an absent permission
        """
        return (
            ("r" if self.readable else "-")
            + ("w" if self.writable else "-")
            + ("x" if self.executable else "-")
        )

    def __str__(self) -> str:
        """Tab-separated detail line with the size padded for column alignment."""
        return f"{self.permissions}\t{str(self.size).rjust(SIZE_COLUMN_WIDTH)}\t{self.name}"
