"""Introductory integer and floating-point exercises and fixed text patterns."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import NamedTuple, TypeVar

PI = 3.14159
"""The value of pi the circle calculations use."""

_T = TypeVar("_T")

_SHAPES = (
    "*********       ***         *             *",
    "*       *     *     *      ***          *   *",
    "*       *     *     *     *****       *       *",
    "*       *     *     *       *       *           *",
    "*       *     *     *       *     *               *",
    "*       *     *     *       *       *           *",
    "*       *     *     *       *         *       *",
    "*       *     *     *       *           *   *",
    "*********       ***         *             *",
    "*********",
    *("*       *",) * 7,
    "*********",
    "  ***",
    *("*     *",) * 7,
    "  *** ",
    "  *",
    " ***",
    "*****",
    *("  *",) * 6,
    "        *",
    "      *   *",
    "    *       *",
    "  *           *",
    "*               *",
    "  *           *",
    "    *       *",
    "      *   *",
    "        *",
)

_STEPS = ("", "**", "**", "****", "*****")

_LETTERS = (
    "AAAAAAA",
    "    A  AA",
    "    A    A",
    "    A  AA",
    "AAAAAAA",
    "",
    "I         I",
    "IIIIIIIIIII",
    "I         I",
    "",
    "LLLLLLLLLLL",
    "L",
    "L",
    "L",
    "",
    "RRRRRRRRRRR",
    "     RR   R",
    "    R R   R",
    "   R  R   R",
    "  R     R",
    "R",
)

_EVEN_ROW = "* * * * * * * *"
_ODD_ROW = " * * * * * * * *"

_PARITY_NAMES = ("even", "odd")


def _trunc_div(dividend: int, divisor: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend < 0) == (divisor < 0) else -quotient


@dataclass(frozen=True)
class Arithmetic:
    """Results of combining two integers."""

    sum: int
    difference: int
    product: int
    quotient: int
    remainder: int


@dataclass(frozen=True)
class ThreeStats:
    """Summary of three integers."""

    sum: int
    average: int
    product: int
    smallest: int
    largest: int


class Circle(NamedTuple):
    """Measurements of a circle."""

    diameter: float
    circumference: float
    area: float


def arithmetic(first: int, second: int) -> Arithmetic:
    """Return sum, difference, product, quotient and remainder.

    The quotient rounds toward zero and the remainder takes the sign of *first*.
    """
    if second == 0:
        raise ZeroDivisionError("second number must not be zero")
    quotient = _trunc_div(first, second)
    return Arithmetic(
        sum=first + second,
        difference=first - second,
        product=first * second,
        quotient=quotient,
        remainder=first - quotient * second,
    )


def compare(first: int, second: int) -> str:
    """Say which of two numbers is larger, or that they are equal."""
    if first == second:
        return "These numbers are equal"
    return f"{max(first, second)} is larger"


def three_stats(first: int, second: int, third: int) -> ThreeStats:
    """Return sum, integer average (toward zero), product, smallest and largest."""
    values = (first, second, third)
    total = sum(values)
    return ThreeStats(
        sum=total,
        average=_trunc_div(total, 3),
        product=first * second * third,
        smallest=min(values),
        largest=max(values),
    )


def circle(radius: float) -> Circle:
    """Return diameter, circumference and area of a circle of *radius*."""
    return Circle(
        diameter=radius * 2,
        circumference=2 * PI * radius,
        area=PI * radius * radius,
    )


def min_max(values: Iterable[int]) -> tuple[int, int]:
    """Return the smallest and the largest of *values*."""
    items = list(values)
    if not items:
        raise ValueError("need at least one value")
    return min(items), max(items)


def parity(number: int) -> str:
    """Return ``"even"`` or ``"odd"``."""
    remainder = number % 2
    return _PARITY_NAMES[remainder]


def is_multiple(first: int, second: int) -> bool:
    """Return True if *second* is a multiple of *first*."""
    if first == 0:
        raise ZeroDivisionError("first number must not be zero")
    return second % first == 0


def five_digits(number: int) -> tuple[int, int, int, int, int]:
    """Split a number from 10000 to 99999 into its five digits."""
    if not 10000 <= number <= 99999:
        raise ValueError(f"{number} is not a 5-digit number!")
    text = str(number)
    return (int(text[0]), int(text[1]), int(text[2]), int(text[3]), int(text[4]))


def squares_and_cubes(limit: int = 10) -> list[tuple[int, int, int]]:
    """Return ``(n, n squared, n cubed)`` for every n from 0 to *limit* inclusive."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    return [(n, n * n, n * n * n) for n in range(limit + 1)]


def checkerboard(rows: int = 8) -> list[str]:
    """Return *rows* lines of alternating, offset rows of stars."""
    if rows < 0:
        raise ValueError("rows must not be negative")
    return [_EVEN_ROW if row % 2 == 0 else _ODD_ROW for row in range(rows)]


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _ask(tokens: Iterator[str], prompt: str, cast: Callable[[str], _T]) -> _T:
    print(prompt, end="", flush=True)
    token = next(tokens, None)
    if token is None:
        raise ValueError("unexpected end of input")
    return cast(token)


def _run(exercise: str, tokens: Iterator[str]) -> None:
    if exercise == "arithmetic":
        first = _ask(tokens, "Enter a number: ", int)
        second = _ask(tokens, "Enter another number: ", int)
        print(f"Number 1 is {first} , and number 2 is {second} ")
        r = arithmetic(first, second)
        print(
            f"sum = {r.sum}, difference = {r.difference}, product = {r.product}, "
            f"quotient = {r.quotient}, remainder = {r.remainder}"
        )
    elif exercise == "count":
        print("1 2 3 4")
        print(" ".join(str(n) for n in range(1, 5)))
        print(*range(1, 5))
    elif exercise == "compare":
        first = _ask(tokens, "Enter a number: ", int)
        second = _ask(tokens, "Enter another number: ", int)
        print(compare(first, second))
    elif exercise == "stats":
        first = _ask(tokens, "Enter three numbers: ", int)
        second = _ask(tokens, "", int)
        third = _ask(tokens, "", int)
        s = three_stats(first, second, third)
        print(f"Sum is {s.sum}")
        print(f"Average is {s.average}")
        print(f"Product is {s.product}")
        print(f"Smallest is {s.smallest}")
        print(f"Largest is {s.largest}")
    elif exercise == "circle":
        c = circle(_ask(tokens, "Enter the radius: ", float))
        print(f"Diameter: {c.diameter:f}")
        print(f"Circumference: {c.circumference:f}")
        print(f"Area: {c.area:f}")
    elif exercise == "shapes":
        print("\n".join(_SHAPES))
    elif exercise == "steps":
        print("\n".join(_STEPS))
    elif exercise == "minmax":
        values = [_ask(tokens, "Enter a number (1): ", int)]
        values += [_ask(tokens, f"Enter another number ({n}): ", int) for n in range(2, 6)]
        smallest, largest = min_max(values)
        print(f"Largest number: {largest}")
        print(f"Smallest number: {smallest}")
    elif exercise == "parity":
        number = _ask(tokens, "Enter a number: ", int)
        print(f"{number} is an {parity(number)} number")
    elif exercise == "letters":
        print("\n".join(_LETTERS))
    elif exercise == "multiple":
        first = _ask(tokens, "Enter two numbers: ", int)
        second = _ask(tokens, "", int)
        if is_multiple(first, second):
            print(f"{second} is multiple of {first}")
        else:
            print("Not multiple")
    elif exercise == "checkerboard":
        board = "\n".join(checkerboard())
        print(board)
        print()
        print(board)
    elif exercise == "digits":
        number = _ask(tokens, "Enter a 5-digit number: ", int)
        print(" ".join(str(digit) for digit in five_digits(number)))
    else:
        print()
        print("number\tsquare\tcube")
        for n, square, cube in squares_and_cubes():
            print(f"{n}\t{square}\t{cube}")


_EXERCISES = (
    "arithmetic",
    "count",
    "compare",
    "stats",
    "circle",
    "shapes",
    "steps",
    "minmax",
    "parity",
    "letters",
    "multiple",
    "checkerboard",
    "digits",
    "table",
)


def main(argv: list[str] | None = None) -> int:
    """Run one exercise; the table of squares and cubes by default."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("exercise", nargs="?", default="table", choices=_EXERCISES)
    args = parser.parse_args(argv)
    try:
        _run(args.exercise, _tokens(sys.stdin))
    except (ValueError, ZeroDivisionError) as error:
        print(f"\n{error}", file=sys.stderr)
        return 1
    return 0