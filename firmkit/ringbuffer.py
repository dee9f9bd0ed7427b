"""A fixed-capacity circular buffer of bytes."""

from __future__ import annotations


class RingBuffer:
    """First-in first-out store of bytes with a fixed capacity.

    Writes to a full buffer are dropped; reading from an empty buffer raises
    ``IndexError``.
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._slots = [0] * capacity
        self._head = 0
        self._tail = 0
        self._count = 0

    def write(self, data: int) -> bool:
        """Store one byte; return False if the buffer was full and it was dropped."""
        if self._count == self.capacity:
            return False
        self._slots[self._head] = data & 0xFF
        self._head = (self._head + 1) % self.capacity
        self._count += 1
        return True

    def read(self) -> int:
        """Remove and return the oldest byte."""
        if not self._count:
            raise IndexError("read from an empty ring buffer")
        value = self._slots[self._tail]
        self._tail = (self._tail + 1) % self.capacity
        self._count -= 1
        return value

    def clear(self) -> None:
        """Discard every stored byte."""
        self._head = 0
        self._tail = 0
        self._count = 0

    def __len__(self) -> int:
        return self._count


def _drain(buffer: RingBuffer) -> None:
    while buffer:
        print(f"{buffer.read():X}")


def main(argv: list[str] | None = None) -> int:
    """Fill an 18-byte buffer twice and print what comes out."""
    buffer = RingBuffer(18)

    print("First cycle")
    for value in range(10, 38):
        buffer.write(value)
    _drain(buffer)

    print("\nSecond cycle")
    for value in range(20, 38):
        buffer.write(value)
    _drain(buffer)
    return 0