import io
import statistics

import pytest

from firmkit.flow import (
    binary_to_decimal,
    count_sevens,
    credit_exceeded,
    interest_charge,
    is_palindrome,
    main,
    miles_per_gallon,
    multiples_table,
    new_balance,
    salary,
    square_pattern,
)


def test_miles_per_gallon_average_is_mean_of_tanks():
    ratios, overall = miles_per_gallon([(12.8, 287), (10.3, 200), (5, 120)])
    assert len(ratios) == 3
    assert overall == pytest.approx(statistics.mean(ratios))
    assert min(ratios) <= overall <= max(ratios)


def test_miles_per_gallon_single_tank():
    ratios, overall = miles_per_gallon([(4.0, 100.0)])
    assert ratios == [overall]
    assert overall * 4.0 == pytest.approx(100.0)


def test_miles_per_gallon_needs_a_tank():
    with pytest.raises(ValueError):
        miles_per_gallon([])


def test_new_balance_credits_cancel_charges():
    assert new_balance(100.0, 25.0, 25.0) == pytest.approx(100.0)
    assert new_balance(100.0, 0.0, 0.0) == pytest.approx(100.0)


@pytest.mark.parametrize(
    "beginning,charges,credits,allowed",
    [(5394.78, 1000.0, 500.0, 5500.0), (1000.0, 123.45, 321.0, 1500.0), (10.0, 0.0, 0.0, 10.0)],
)
def test_credit_exceeded_matches_balance(beginning, charges, credits, allowed):
    exceeded = credit_exceeded(beginning, charges, credits, allowed)
    assert exceeded == (new_balance(beginning, charges, credits) > allowed)


def test_credit_exceeded_at_limit_is_not_exceeded():
    assert credit_exceeded(10.0, 0.0, 0.0, 10.0) is False


def test_salary_base_and_rate():
    assert salary(0) == pytest.approx(200)
    assert salary(100) - salary(0) == pytest.approx(9.0)


def test_interest_charge_over_a_year():
    assert interest_charge(1000.0, 0.1, 365) == pytest.approx(1000.0 * 0.1)
    assert interest_charge(0.0, 0.1, 30) == 0.0


def test_multiples_table():
    table = multiples_table(10)
    assert len(table) == 10
    assert table[0] == (1, 10, 100, 1000)
    assert all(b == 10 * a and c == 10 * b and d == 10 * c for a, b, c, d in table)


@pytest.mark.parametrize("number,expected", [(12321, True), (55555, True), (12345, False), (11612, False)])
def test_is_palindrome(number, expected):
    assert is_palindrome(number) is expected


def test_is_palindrome_rejects_non_five_digit():
    with pytest.raises(ValueError):
        is_palindrome(1234)


@pytest.mark.parametrize("value", range(32))
def test_binary_round_trip(value):
    assert binary_to_decimal(int(format(value, "b"))) == value


def test_binary_leading_digit_weight():
    assert binary_to_decimal(10000) == 16
    assert binary_to_decimal(0) == 0


@pytest.mark.parametrize("number", [12, 20000, 100000, -1])
def test_binary_rejects_non_binary(number):
    with pytest.raises(ValueError):
        binary_to_decimal(number)


def test_count_sevens():
    assert count_sevens(77777) == 5
    assert count_sevens(12345) == 0
    with pytest.raises(ValueError):
        count_sevens(777)


def test_square_pattern():
    assert square_pattern(3) == ["***"] * 3
    assert square_pattern(20) == ["*" * 20] * 20


@pytest.mark.parametrize("side", [0, 21, -5])
def test_square_pattern_rejects(side):
    with pytest.raises(ValueError):
        square_pattern(side)


def test_main_square_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n"))
    assert main(["square"]) == 0
    assert capsys.readouterr().out.endswith("**\n**\n")


def test_main_square_rejects_bad_side(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("25\n"))
    assert main(["square"]) == 1
    assert "between 1 and 20" in capsys.readouterr().err