"""A two-door keypad lock driven one digit at a time."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from typing import TextIO

DEFAULT_CODES: tuple[tuple[int, ...], ...] = ((3, 6, 5, 7, 9), (3, 6, 5, 8, 1))
_SEPARATOR = "----------------\n"


class DoorLock:
    """A series of doors, each opened by its own digit code, in order.

    A wrong digit restarts the code of the current door.
    """

    def __init__(self, codes: Sequence[Sequence[int]] = DEFAULT_CODES) -> None:
        self.codes = tuple(tuple(code) for code in codes)
        if not self.codes or not all(self.codes):
            raise ValueError("need at least one door, each with a non-empty code")
        self.door = 0
        self.position = 0

    @property
    def done(self) -> bool:
        """True once every door has been opened."""
        return self.door == len(self.codes)

    def enter(self, digit: int) -> bool:
        """Key in one digit; return False if it was wrong and the code restarts."""
        if self.done:
            raise RuntimeError("every door is already open")
        code = self.codes[self.door]
        if digit != code[self.position]:
            self.position = 0
            return False
        self.position += 1
        if self.position == len(code):
            self.door += 1
            self.position = 0
        return True


def _prompt(door: int) -> str:
    return f"Enter the password for door {door + 1}: "


def run(digits: Iterable[int], out: TextIO | None = None) -> bool:
    """Feed *digits* to a lock with the default codes, writing its dialogue to *out*.

    Returns True once every door is open, False if the digits run out first.
    """
    out = sys.stdout if out is None else out
    lock = DoorLock()
    out.write(_prompt(lock.door))
    for digit in digits:
        door = lock.door
        if not lock.enter(digit):
            out.write("Wrong digit!\n")
            out.write(_prompt(lock.door))
        elif lock.door != door:
            out.write(f"The door {door + 1} has been opened!\n")
            if lock.done:
                return True
            out.write(_SEPARATOR)
            out.write(_prompt(lock.door))
    return False


def _read_digits(stream: TextIO) -> Iterator[int]:
    for line in stream:
        for token in line.split():
            yield int(token)


def main(argv: list[str] | None = None) -> int:
    """Read digits from standard input until both doors are open."""
    try:
        opened = run(_read_digits(sys.stdin))
    except ValueError as error:
        print(f"\ninvalid digit: {error}", file=sys.stderr)
        return 1
    return 0 if opened else 1