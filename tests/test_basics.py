import pytest

from firmkit.basics import (
    arithmetic,
    checkerboard,
    circle,
    compare,
    five_digits,
    is_multiple,
    main,
    min_max,
    parity,
    squares_and_cubes,
    three_stats,
)


@pytest.mark.parametrize("first,second", [(7, 2), (-7, 2), (7, -2), (-7, -2), (0, 5), (9, 3)])
def test_arithmetic_division_identity(first, second):
    result = arithmetic(first, second)
    assert result.quotient * second + result.remainder == first
    assert abs(result.remainder) < abs(second)
    assert result.remainder == 0 or (result.remainder < 0) == (first < 0)


def test_arithmetic_truncates_toward_zero():
    assert arithmetic(-7, 2).quotient == -3


def test_arithmetic_sum_and_difference_are_consistent():
    result = arithmetic(12, 5)
    assert result.sum - result.difference == 2 * 5
    assert result.product == 12 * 5


def test_arithmetic_by_zero():
    with pytest.raises(ZeroDivisionError):
        arithmetic(4, 0)


def test_compare_messages():
    assert compare(4, 9) == "9 is larger"
    assert compare(9, 4) == "9 is larger"
    assert compare(5, 5) == "These numbers are equal"


@pytest.mark.parametrize("values", [(1, 2, 3), (3, 1, 2), (5, 5, 1), (-4, 0, 4)])
def test_three_stats_bounds(values):
    stats = three_stats(*values)
    assert stats.smallest in values
    assert stats.largest in values
    assert all(stats.smallest <= v <= stats.largest for v in values)
    assert stats.sum == sum(values)


def test_circle_uses_fixed_pi():
    assert circle(1.0).area == pytest.approx(3.14159)
    assert circle(1.0).diameter == pytest.approx(2.0)


def test_circle_scaling():
    small, big = circle(1.5), circle(3.0)
    assert big.area == pytest.approx(4 * small.area)
    assert big.circumference == pytest.approx(2 * small.circumference)
    assert circle(0.0) == (0.0, 0.0, 0.0)


def test_min_max():
    values = [7, -3, 12, 0, 5]
    smallest, largest = min_max(values)
    assert smallest == -3
    assert largest == 12


def test_min_max_empty():
    with pytest.raises(ValueError):
        min_max([])


@pytest.mark.parametrize("number,expected", [(4, "even"), (0, "even"), (-3, "odd"), (7, "odd")])
def test_parity(number, expected):
    assert parity(number) == expected


def test_is_multiple():
    assert is_multiple(3, 9) is True
    assert is_multiple(3, 10) is False
    with pytest.raises(ZeroDivisionError):
        is_multiple(0, 5)


@pytest.mark.parametrize("number", [10000, 12345, 54321, 99999])
def test_five_digits_round_trip(number):
    digits = five_digits(number)
    assert len(digits) == 5
    assert int("".join(str(d) for d in digits)) == number


@pytest.mark.parametrize("number", [9999, 100000, -12345])
def test_five_digits_rejects(number):
    with pytest.raises(ValueError):
        five_digits(number)


def test_squares_and_cubes():
    table = squares_and_cubes(10)
    assert len(table) == 11
    assert table[0] == (0, 0, 0)
    assert all(square == n * n and cube == square * n for n, square, cube in table)


def test_checkerboard_rows():
    board = checkerboard(8)
    assert len(board) == 8
    assert board[0] == "* * * * * * * *"
    assert board[1] == " * * * * * * * *"
    assert board[::2] == [board[0]] * 4


def test_main_prints_table(capsys):
    assert main(["table"]) == 0
    out = capsys.readouterr().out
    assert "number\tsquare\tcube" in out