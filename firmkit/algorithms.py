"""Array-based exercises: salary ranges, unique values, primes and dice sums."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Iterable
from math import isqrt

_SALARY_BUCKETS = 9
_DICE_SUMS = 11
_INVALID = -1


def _salary(sales: int) -> int:
    return int(200 + sales * 0.09)


def salary_histogram(sales: Iterable[int]) -> list[int]:
    """Count salaries (200 plus 9% of sales) in the ranges $200-$299 ... $900-$999, $1000+."""
    counts = [0] * _SALARY_BUCKETS
    for amount in sales:
        salary = _salary(amount)
        if salary < 200:
            raise ValueError(f"sales of {amount} give a salary below $200")
        counts[min(salary // 100 - 2, _SALARY_BUCKETS - 1)] += 1
    return counts


def unique_in_range(numbers: Iterable[int]) -> list[int]:
    """Return the distinct numbers in first-seen order.

    Numbers outside 10..100 are all represented by a single -1.
    """
    result: list[int] = []
    for number in numbers:
        value = number if 10 <= number <= 100 else _INVALID
        if value not in result:
            result.append(value)
    return result


def is_prime(number: int) -> bool:
    """Return True if *number* has no divisor between 2 and itself; 1 counts as prime."""
    if number < 1:
        raise ValueError("number must be positive")
    return all(number % divisor for divisor in range(2, isqrt(number) + 1))


def primes_below(limit: int) -> list[int]:
    """Return every number from 1 to *limit* - 1 that ``is_prime`` accepts."""
    if limit <= 1:
        return []
    composite = bytearray(limit)
    for number in range(2, isqrt(limit - 1) + 1):
        if not composite[number]:
            multiples = range(number * number, limit, number)
            composite[number * number :: number] = b"\x01" * len(multiples)
    return [number for number in range(1, limit) if not composite[number]]


def dice_histogram(rolls: int = 3600, rng: random.Random | None = None) -> list[int]:
    """Roll two dice *rolls* times; return how often each sum from 2 to 12 came up."""
    if rolls < 0:
        raise ValueError("rolls must not be negative")
    rng = random.Random() if rng is None else rng
    counts = [0] * _DICE_SUMS
    for _ in range(rolls):
        counts[rng.randint(1, 6) + rng.randint(1, 6) - 2] += 1
    return counts


def _read_ints(prompt: str | None = None) -> Iterable[int]:
    while True:
        if prompt:
            print(prompt, end="", flush=True)
        line = sys.stdin.readline()
        if not line:
            return
        yield from (int(token) for token in line.split())


def _salaries() -> None:
    def entries() -> Iterable[int]:
        for amount in _read_ints("Enter employee sales (-1 to end program): "):
            if amount == -1:
                return
            print(f"Employee Salary: {_salary(amount)}\n")
            yield amount

    counts = salary_histogram(entries())
    print("Salary range\tEmployees")
    for position, count in enumerate(counts[:-1]):
        low = 100 * (position + 2)
        print(f"${low}-${low + 99}\t{count}")
    print(f"Over $1000\t{counts[-1]}")


def main(argv: list[str] | None = None) -> int:
    """Run one of the exercises; the dice histogram by default."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "exercise", nargs="?", default="dice", choices=("dice", "primes", "salary", "unique")
    )
    args = parser.parse_args(argv)

    try:
        if args.exercise == "dice":
            print("Sum\tTimes")
            for total, times in enumerate(dice_histogram(), start=2):
                print(f"{total}\t{times}")
        elif args.exercise == "primes":
            print("1 to 1000 primes")
            print(" ".join(str(number) for number in primes_below(1000)))
        elif args.exercise == "salary":
            _salaries()
        else:
            numbers = list(_read_ints())
            print(" ".join(str(number) for number in unique_in_range(numbers)))
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    return 0