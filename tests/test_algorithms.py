import io
import random

import pytest

from firmkit.algorithms import (
    dice_histogram,
    is_prime,
    primes_below,
    salary_histogram,
    unique_in_range,
)
from firmkit.algorithms import main


def test_salary_histogram_empty():
    assert salary_histogram([]) == [0] * 9


def test_salary_histogram_zero_sales_is_lowest_range():
    counts = salary_histogram([0])
    assert counts[0] == 1
    assert sum(counts) == 1


def test_salary_histogram_large_sales_in_top_range():
    counts = salary_histogram([100_000, 50_000])
    assert counts[-1] == 2
    assert sum(counts[:-1]) == 0


def test_salary_histogram_total_matches_input():
    sales = [0, 1000, 3000, 5000, 7000, 9000, 12000]
    counts = salary_histogram(sales)
    assert sum(counts) == len(sales)
    assert len(counts) == 9


def test_salary_histogram_negative_sales_raise():
    with pytest.raises(ValueError):
        salary_histogram([-1000])


def test_unique_in_range_keeps_first_seen_order():
    assert unique_in_range([10, 20, 10, 30, 20]) == [10, 20, 30]


def test_unique_in_range_marks_out_of_range_once():
    assert unique_in_range([5, 200, 50]) == [-1, 50]


def test_unique_in_range_has_no_duplicates():
    values = unique_in_range([15, 15, 99, 100, 15, 99])
    assert len(values) == len(set(values))


@pytest.mark.parametrize("number", [1, 2, 3, 5, 7, 13, 97])
def test_is_prime_true(number):
    assert is_prime(number)


@pytest.mark.parametrize("number", [4, 9, 15, 100, 91])
def test_is_prime_false(number):
    assert not is_prime(number)


def test_is_prime_rejects_non_positive():
    with pytest.raises(ValueError):
        is_prime(0)


def test_primes_below_agrees_with_is_prime():
    assert primes_below(200) == [n for n in range(1, 200) if is_prime(n)]


def test_primes_below_small_limits():
    assert primes_below(1) == []
    assert primes_below(2) == [1]


def test_primes_below_excludes_limit():
    assert 97 in primes_below(98)
    assert 97 not in primes_below(97)


def test_dice_histogram_counts_all_rolls():
    counts = dice_histogram(3600, random.Random(1))
    assert len(counts) == 11
    assert sum(counts) == 3600


def test_dice_histogram_is_reproducible_with_seed():
    first = dice_histogram(500, random.Random(7))
    second = dice_histogram(500, random.Random(7))
    assert first == second
    assert len(first) == 11
    assert sum(first) == 500
    assert all(count >= 0 for count in first)


def test_dice_histogram_zero_rolls():
    assert dice_histogram(0) == [0] * 11


def test_dice_histogram_rejects_negative():
    with pytest.raises(ValueError):
        dice_histogram(-1)


def test_main_dice(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Sum\tTimes"
    assert sum(int(line.split("\t")[1]) for line in lines[1:]) == 3600


def test_main_unique(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("10 20 10 5 30\n"))
    assert main(["unique"]) == 0
    assert capsys.readouterr().out.strip() == "10 20 -1 30"


def test_main_salary(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n100000\n-1\n"))
    assert main(["salary"]) == 0
    out = capsys.readouterr().out
    assert "$200-$299\t1" in out
    assert "Over $1000\t1" in out