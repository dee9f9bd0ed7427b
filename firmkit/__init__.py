"""Embedded-style building blocks: bit helpers, ring buffer, record queue, scheduler, state machines and exercises."""

__version__ = "0.1.0"

__all__ = [
    "algorithms",
    "arrays",
    "basics",
    "bits",
    "doorlock",
    "flow",
    "gears",
    "packing",
    "queue",
    "ringbuffer",
    "scheduler",
]