"""Loop and branch exercises: fuel economy, accounts, pay, digits and patterns."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Iterator
from typing import TypeVar

from firmkit.basics import five_digits

_T = TypeVar("_T")
_SENTINEL = -1


def miles_per_gallon(tanks: Iterable[tuple[float, float]]) -> tuple[list[float], float]:
    """Return miles per gallon for each ``(gallons, miles)`` tank and their average."""
    ratios = [miles / gallons for gallons, miles in tanks]
    if not ratios:
        raise ValueError("need at least one tank")
    return ratios, sum(ratios) / len(ratios)


def new_balance(beginning: float, charges: float, credits: float) -> float:
    """Return the balance after adding charges and subtracting credits."""
    return beginning + charges - credits


def credit_exceeded(beginning: float, charges: float, credits: float, allowed: float) -> bool:
    """Return True if the new balance is above the allowed credit."""
    return new_balance(beginning, charges, credits) > allowed


def salary(sales: float) -> float:
    """Return the weekly pay: 200 plus 9% of sales."""
    return 200 + sales * 0.09


def interest_charge(principal: float, rate: float, days: float) -> float:
    """Return the simple interest on a loan over *days* days of a 365-day year."""
    return principal * rate * days / 365


def multiples_table(limit: int = 10) -> list[tuple[int, int, int, int]]:
    """Return ``(N, 10N, 100N, 1000N)`` for N from 1 to *limit*."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    return [(n, 10 * n, 100 * n, 1000 * n) for n in range(1, limit + 1)]


def is_palindrome(number: int) -> bool:
    """Return True if a 5-digit number reads the same both ways."""
    digits = five_digits(number)
    return digits == digits[::-1]


def _binary_digits(number: int) -> str:
    text = f"{number:05d}" if number >= 0 else ""
    if len(text) != 5 or any(char not in "01" for char in text):
        raise ValueError("Not a binary number!")
    return text


def binary_to_decimal(number: int) -> int:
    """Read a number of up to five 0/1 decimal digits as binary."""
    return int(_binary_digits(number), 2)


def count_sevens(number: int) -> int:
    """Return how many digits of a 5-digit number are 7."""
    return five_digits(number).count(7)


def square_pattern(side: int) -> list[str]:
    """Return a square of stars with *side* from 1 to 20."""
    if not 1 <= side <= 20:
        raise ValueError("The side must be between 1 and 20!")
    return ["*" * side] * side


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _ask(tokens: Iterator[str], prompt: str, cast: Callable[[str], _T]) -> _T:
    print(prompt, end="", flush=True)
    token = next(tokens, None)
    if token is None:
        raise ValueError("unexpected end of input")
    return cast(token)


def _mpg(tokens: Iterator[str]) -> None:
    tanks: list[tuple[float, float]] = []
    while True:
        gallons = _ask(tokens, "Enter the gallons used (-1 to end): ", float)
        if gallons == _SENTINEL:
            break
        miles = _ask(tokens, "Enter the miles driven: ", float)
        ratio = miles_per_gallon([(gallons, miles)])[1]
        print(f"The miles / gallon for this tank was {ratio:f}\n")
        tanks.append((gallons, miles))
    _, overall = miles_per_gallon(tanks)
    print(f"The overall average miles / gallon was: {overall:f}")


def _account(tokens: Iterator[str], first_prompt: str) -> tuple[int, float, float, float, float] | None:
    number = _ask(tokens, first_prompt, int)
    if number == _SENTINEL and "-1" in first_prompt:
        return None
    beginning = _ask(tokens, "Enter Month beggining balance: ", float)
    charges = _ask(tokens, "Enter Month total charges: ", float)
    credits = _ask(tokens, "Enter Month total credits: ", float)
    allowed = _ask(tokens, "Enter Allowed credit: ", float)
    return number, beginning, charges, credits, allowed


def _decrements() -> None:
    i = 10
    print(f"Start value i={i}")
    for _ in range(2):
        i -= 1
        print(f"This line has a predecrement --i={i}")
    for _ in range(2):
        print(f"This line has a postdecrement i--={i}")
        i -= 1
        print(f"The past line had a postdecrement (value is not changed in this line)i={i}")


def _run(exercise: str, tokens: Iterator[str]) -> None:
    if exercise == "mpg":
        _mpg(tokens)
    elif exercise == "balance":
        account = _account(tokens, "Enter account number: ")
        assert account is not None
        _, beginning, charges, credits, allowed = account
        print(f"New balance: {new_balance(beginning, charges, credits):f}")
        if credit_exceeded(beginning, charges, credits, allowed):
            print("Credit Limit Exceeded")
    elif exercise == "credit":
        while (account := _account(tokens, "Enter account number (-1 to end): ")) is not None:
            number, beginning, charges, credits, allowed = account
            print()
            if credit_exceeded(beginning, charges, credits, allowed):
                print(f"Account number: {number}")
                print(f"Credit limit: {allowed:f}")
                print(f"Balance: {new_balance(beginning, charges, credits):f}")
                print("Credit Limit Exceeded\n")
    elif exercise == "salary":
        while (sales := _ask(tokens, "Enter sales in dollars (-1 to end): ", float)) != _SENTINEL:
            print(f"Salary is: {salary(sales):f} \n")
    elif exercise == "interest":
        while (principal := _ask(tokens, "Enter loan principal: ", float)) != _SENTINEL:
            rate = _ask(tokens, "Enter interest rate: ", float)
            days = _ask(tokens, "Enter loan days: ", float)
            print(f"Interest charge: {interest_charge(principal, rate, days):f}\n")
    elif exercise == "decrement":
        _decrements()
    elif exercise == "count":
        print("".join(f"{n}   " for n in range(1, 11)))
    elif exercise == "table":
        print("N\t10*N\t100*N\t1000*N")
        for row in multiples_table():
            print("\t".join(str(value) for value in row))
    elif exercise == "palindrome":
        number = _ask(tokens, "Enter a 5-digit number: ", int)
        print(" ".join(str(digit) for digit in five_digits(number)))
        if is_palindrome(number):
            print(f"{number} is palindrome!")
    elif exercise == "binary":
        number = _ask(tokens, "Enter a 5-digit binary number: ", int)
        digits = _binary_digits(number)
        print(f"Binary Number: {' '.join(digits)}")
        print(f"Decimal: {binary_to_decimal(number)}")
    elif exercise == "sevens":
        number = _ask(tokens, "Enter a 5-digit number: ", int)
        print(f"{number} has {count_sevens(number)} 7s")
    elif exercise == "grid":
        print("\n".join(["*" * 10] * 10))
    else:
        side = _ask(tokens, "Enter side of square (from 1 to 20): ", int)
        print("\n".join(square_pattern(side)))


_EXERCISES = (
    "mpg",
    "balance",
    "credit",
    "salary",
    "interest",
    "decrement",
    "count",
    "table",
    "palindrome",
    "binary",
    "sevens",
    "grid",
    "square",
)


def main(argv: list[str] | None = None) -> int:
    """Run one exercise; the star square by default."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("exercise", nargs="?", default="square", choices=_EXERCISES)
    args = parser.parse_args(argv)
    try:
        _run(args.exercise, _tokens(sys.stdin))
    except (ValueError, ZeroDivisionError) as error:
        print(f"\n{error}", file=sys.stderr)
        return 1
    return 0