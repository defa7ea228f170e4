"""
History buffer domain entity.
"""

from typing import Iterator, Optional


class HistoryBuffer:
    """
    Fixed-capacity, ordered sequence of history entries.

    Appending to a full buffer silently drops the oldest entry. Backed by a ring
    of slots with a head index and an entry count.
    """

    def __init__(self, capacity: int):
        """
        Initialize the buffer.

        Args:
            capacity: Maximum number of entries kept. Must be >= 1.

        Raises:
            ValueError: If capacity is not a positive integer
        """
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise ValueError("capacity must be an integer")
        if capacity < 1:
            raise ValueError("capacity must be >= 1")

        self._slots: list[Optional[str]] = [None] * capacity
        self._head = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def append(self, entry: str) -> None:
        """
        Append an entry, evicting the oldest one when the buffer is full.

        Args:
            entry: Line of text to store
        """
        if self._size == self.capacity:
            # Overwrite the oldest slot and move the head past it.
            self._slots[self._head] = entry
            self._head = (self._head + 1) % self.capacity
            return

        self._slots[(self._head + self._size) % self.capacity] = entry
        self._size += 1

    def clear(self) -> None:
        """Remove every entry, keeping the capacity."""
        self._slots = [None] * self.capacity
        self._head = 0
        self._size = 0

    def entries(self) -> tuple[str, ...]:
        """
        Snapshot of the entries in insertion order.

        Returns:
            Tuple of entries, oldest first
        """
        return tuple(
            self._slots[(self._head + offset) % self.capacity]  # type: ignore[misc]
            for offset in range(self._size)
        )

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"HistoryBuffer(capacity={self.capacity}, size={self._size})"
