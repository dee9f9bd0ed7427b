"""Small routines over sequences of unsigned integers and fixed-width time strings."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
_WEEKDAYS = ("Mo", "Tu", "We", "Th", "Fr", "Sa", "Su")


def average(values: Sequence[int]) -> int:
    """Return the integer average of *values* using an 8-bit accumulator.

    The running sum wraps at 256, as an unsigned byte would.
    """
    if not values:
        raise ValueError("cannot average an empty sequence")
    total = 0
    for value in values:
        total = (total + value) & 0xFF
    return total // len(values)


def copy_array(values: Sequence[int]) -> list[int]:
    """Return an independent copy of *values*."""
    return list(values)


def arrays_differ(first: Sequence[int], second: Sequence[int]) -> bool:
    """Return True if the sequences differ in length or in any element."""
    return len(first) != len(second) or any(a != b for a, b in zip(first, second))


def largest(values: Sequence[int]) -> int:
    """Return the largest element of *values*."""
    if not values:
        raise ValueError("cannot take the largest of an empty sequence")
    return max(values)


def sort_values(values: Sequence[int]) -> list[int]:
    """Return the elements of *values* in ascending order."""
    return sorted(values)


def _two_digits(value: int, name: str) -> str:
    if not 0 <= value <= 99:
        raise ValueError(f"{name} must be between 0 and 99")
    return f"{value:02d}"


def time_string(hours: int, minutes: int, seconds: int) -> str:
    """Format a time as ``HH:MM:SS``."""
    return ":".join(
        (
            _two_digits(hours, "hours"),
            _two_digits(minutes, "minutes"),
            _two_digits(seconds, "seconds"),
        )
    )


def date_string(month: int, day: int, year: int, weekday: int) -> str:
    """Format a date as ``Mon DD, YYYY Wd``; month is 1-12, weekday 0 (Monday) to 6."""
    if not 1 <= month <= 12:
        raise ValueError("month must be between 1 and 12")
    if not 0 <= weekday <= 6:
        raise ValueError("weekday must be between 0 and 6")
    if not 0 <= year <= 9999:
        raise ValueError("year must be between 0 and 9999")
    return f"{_MONTHS[month - 1]} {_two_digits(day, 'day')}, {year:04d} {_WEEKDAYS[weekday]}"


def _line(values: Sequence[int]) -> str:
    return " ".join(str(value) for value in values)


def main(argv: list[str] | None = None) -> int:
    """Print a walk through the sequence and string routines."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.parse_args(argv)

    first = [10, 10, 10, 10, 10, 20, 10, 10, 10, 10]
    other = [10, 10, 10, 10, 10, 30, 10, 10, 10, 10]
    shorts = [50, 2, 1, 11, 10, 30, 10, 20, 10, 10]
    unsorted = [50, 2, 1, 11, 10, 30, 10, 20, 444, 10, 99, 8, 23, 12, 55, 16, 18, 19, 20, 21]

    lines = [
        _line(first),
        str(average(first)),
        _line(copy_array(first)),
        str(int(arrays_differ(first, other))),
        str(largest(shorts)),
        _line(unsorted),
        _line(sort_values(unsorted)),
        time_string(23, 30, 0),
        date_string(12, 16, 2001, 5),
        date_string(1, 7, 1966, 3),
    ]
    print("\n".join(lines))
    return 0