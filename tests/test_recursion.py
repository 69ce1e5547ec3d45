import pytest

from drillbook.recursion import (
    factorial,
    fibonacci,
    hanoi_count,
    hanoi_moves,
    star_fractal,
)


def test_factorial_base():
    assert factorial(0) == 1
    assert factorial(1) == 1


@pytest.mark.parametrize("n", range(1, 13))
def test_factorial_recurrence(n):
    assert factorial(n) == n * factorial(n - 1)


def test_fibonacci_base():
    assert fibonacci(0) == 0
    assert fibonacci(1) == 1


@pytest.mark.parametrize("n", range(2, 25))
def test_fibonacci_recurrence(n):
    assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


def test_fibonacci_negative():
    with pytest.raises(ValueError):
        fibonacci(-1)


def test_star_fractal_base():
    assert star_fractal(3) == ["***", "* *", "***"]


def test_star_fractal_shape_and_symmetry():
    rows = star_fractal(27)
    assert len(rows) == 27
    assert all(len(row) == 27 for row in rows)
    assert rows == rows[::-1]
    assert rows == ["".join(col) for col in zip(*rows)]
    assert all(rows[r][c] == " " for r in range(9, 18) for c in range(9, 18))


def test_star_fractal_star_count_grows_by_eight():
    small = sum(row.count("*") for row in star_fractal(3))
    large = sum(row.count("*") for row in star_fractal(9))
    assert large == small * 8


@pytest.mark.parametrize("n", [0, 1, 2, 6, 10])
def test_star_fractal_rejects_other_sizes(n):
    with pytest.raises(ValueError):
        star_fractal(n)


def test_hanoi_single_disc():
    assert hanoi_moves(1) == [(1, 3)]
    assert hanoi_count(0) == 0


@pytest.mark.parametrize("n", range(1, 8))
def test_hanoi_moves_are_legal(n):
    moves = hanoi_moves(n)
    assert len(moves) == hanoi_count(n)
    pegs = {1: list(range(n, 0, -1)), 2: [], 3: []}
    for source, target in moves:
        disc = pegs[source].pop()
        assert not pegs[target] or pegs[target][-1] > disc
        pegs[target].append(disc)
    assert pegs[3] == list(range(n, 0, -1))


def test_hanoi_moves_rejects_no_discs():
    with pytest.raises(ValueError):
        hanoi_moves(0)