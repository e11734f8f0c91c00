"""Fixed-capacity ring buffer holding extendable LTPs awaiting extension."""

from __future__ import annotations

from typing import Iterable, Iterator, List

from ltp_search.errors import BufferExhaustionError


class RingBuffer:
    """FIFO of integers over a preallocated slot list.

    Records are appended at ``free_at`` and consumed from ``process_from``;
    both cursors wrap modulo the capacity. A push into a full buffer raises
    BufferExhaustionError rather than overwriting a live record.

    Attributes:
        capacity: Number of slots.
        process_from: Slot of the oldest live record.
        free_at: Slot the next pushed record is written to.
        peak: Largest number of live records seen so far.
    """

    def __init__(self, capacity: int, initial: Iterable[int] = ()):
        """Initialize ring buffer.

        Args:
            capacity: Number of slots, must be >= 1.
            initial: Records pushed in order at construction.

        Raises:
            ValueError: If capacity < 1.
            BufferExhaustionError: If initial holds more than capacity records.
        """
        if capacity < 1:
            raise ValueError(f"Capacity must be >= 1, got {capacity}")

        self.capacity = capacity
        self._slots: List[int] = [0] * capacity
        self.process_from = 0
        self.free_at = 0
        self._size = 0
        self.peak = 0

        for value in initial:
            self.push(value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        for offset in range(self._size):
            yield self.peek(offset)

    def __repr__(self) -> str:
        return (f"RingBuffer(capacity={self.capacity}, size={self._size}, "
                f"process_from={self.process_from}, free_at={self.free_at})")

    @property
    def is_full(self) -> bool:
        return self._size == self.capacity

    def push(self, value: int) -> None:
        """Append a record at the write cursor."""
        if self.is_full:
            raise BufferExhaustionError(self.capacity)

        self._slots[self.free_at] = value
        self.free_at = (self.free_at + 1) % self.capacity
        self._size += 1
        if self._size > self.peak:
            self.peak = self._size

    def peek(self, offset: int = 0) -> int:
        """Read the live record ``offset`` places after the read cursor."""
        if not 0 <= offset < self._size:
            raise IndexError(f"Offset {offset} outside live range [0, {self._size})")
        return self._slots[(self.process_from + offset) % self.capacity]

    def pop(self) -> int:
        """Remove and return the oldest live record."""
        if self._size == 0:
            raise IndexError("pop from empty RingBuffer")

        value = self._slots[self.process_from]
        self.process_from = (self.process_from + 1) % self.capacity
        self._size -= 1
        return value
