"""A bounded first-in first-out queue of fixed-size binary records."""

from __future__ import annotations

import threading
from collections import deque
from collections.abc import Iterator
from contextlib import contextmanager

DISABLE_ALL_INTERRUPTS = 0xFF
"""Interrupt number that stands for every interrupt line at once."""

_LAST_INTERRUPT_LINE = 30
_MAX_RECORD_SIZE = 0xFF


class QueueError(Exception):
    """Raised when writing to a full queue or reading from an empty one."""


def _check_interrupt(isr: int) -> None:
    if isr != DISABLE_ALL_INTERRUPTS and not 0 <= isr <= _LAST_INTERRUPT_LINE:
        raise ValueError(
            f"interrupt must be 0..{_LAST_INTERRUPT_LINE} or {DISABLE_ALL_INTERRUPTS:#x}, got {isr}"
        )


class Queue:
    """Holds up to *elements* records of exactly *size* bytes each.

    The ``*_isr`` methods run the matching operation with the given interrupt
    line (or all of them, for ``DISABLE_ALL_INTERRUPTS``) masked, so that a
    producer and a consumer on different threads see a consistent queue.
    """

    def __init__(self, elements: int, size: int) -> None:
        if elements <= 0:
            raise ValueError("elements must be positive")
        if not 0 < size <= _MAX_RECORD_SIZE:
            raise ValueError(f"size must be between 1 and {_MAX_RECORD_SIZE}")
        self.elements = elements
        self.size = size
        self._records: deque[bytes] = deque()
        self._lock = threading.RLock()

    def write(self, data: bytes | bytearray | memoryview) -> None:
        """Append one record; raise QueueError if the queue is full."""
        if data is None:
            raise ValueError("data must not be None")
        record = bytes(data)
        if len(record) != self.size:
            raise ValueError(f"record must be {self.size} bytes, got {len(record)}")
        if self.is_full():
            raise QueueError("write to a full queue")
        self._records.append(record)

    def read(self) -> bytes:
        """Remove and return the oldest record; raise QueueError if the queue is empty."""
        if self.is_empty():
            raise QueueError("read from an empty queue")
        return self._records.popleft()

    def is_empty(self) -> bool:
        """Return True if no record can be read."""
        return not self._records

    def is_full(self) -> bool:
        """Return True if no record can be written."""
        return len(self._records) == self.elements

    def flush(self) -> None:
        """Discard every stored record."""
        self._records.clear()

    @contextmanager
    def _masked(self, isr: int) -> Iterator[None]:
        _check_interrupt(isr)
        with self._lock:
            yield

    def write_isr(self, data: bytes | bytearray | memoryview, isr: int) -> None:
        """Like ``write``, with interrupt *isr* masked for the duration."""
        if data is None:
            raise ValueError("data must not be None")
        with self._masked(isr):
            self.write(data)

    def read_isr(self, isr: int) -> bytes:
        """Like ``read``, with interrupt *isr* masked for the duration."""
        with self._masked(isr):
            return self.read()

    def is_empty_isr(self, isr: int) -> bool:
        """Like ``is_empty``, with interrupt *isr* masked for the duration."""
        with self._masked(isr):
            return self.is_empty()

    def flush_isr(self, isr: int) -> None:
        """Like ``flush``, with interrupt *isr* masked for the duration."""
        with self._masked(isr):
            self.flush()

    def __len__(self) -> int:
        return len(self._records)