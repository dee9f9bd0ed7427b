"""A gear selector that cycles through its states on the right key."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from enum import Enum
from typing import TextIO


class Gear(Enum):
    """Selector positions; each value is the key that leaves the position."""

    DRIVE = "X"
    NEUTRAL = "Y"
    REVERSE = "Z"

    @property
    def key(self) -> str:
        """The key that moves on from this gear."""
        return self.value

    @property
    def next(self) -> Gear:
        """The gear reached by pressing this gear's key."""
        return _NEXT[self]


_NEXT = {Gear.DRIVE: Gear.NEUTRAL, Gear.NEUTRAL: Gear.REVERSE, Gear.REVERSE: Gear.DRIVE}


class GearSelector:
    """Holds the current gear and moves on when the matching key is pressed."""

    def __init__(self, start: Gear = Gear.NEUTRAL) -> None:
        self.state = start

    def prompt(self) -> str:
        """Describe the current gear and the key that leaves it."""
        return f"State {self.state.name} - Enter {self.state.key} to pass"

    def press(self, key: str) -> bool:
        """Move to the next gear if *key* is the expected one; return whether it was."""
        if key != self.state.key:
            return False
        self.state = self.state.next
        return True


def _read_keys(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from (char for char in line if not char.isspace())


def main(argv: list[str] | None = None) -> int:
    """Drive the selector from keys typed on standard input until it ends."""
    print("Starting!!!")
    selector = GearSelector()
    keys = _read_keys(sys.stdin)
    while True:
        print(selector.prompt())
        key = next(keys, None)
        if key is None:
            return 0
        expected = selector.state.key
        if not selector.press(key):
            print(f"Error. Character must be {expected}")