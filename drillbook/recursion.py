"""Recursion drills: factorial, Fibonacci, a star fractal and the towers of Hanoi."""

import math
from collections.abc import Iterator


def factorial(n: int) -> int:
    """n! for positive n; 1 for n <= 0."""
    return math.prod(range(1, n + 1))


def fibonacci(n: int) -> int:
    """The n-th Fibonacci number, with fibonacci(0) == 0."""
    if n < 0:
        raise ValueError("n must not be negative")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def _is_power_of_three(n: int) -> bool:
    if n < 3:
        return False
    while n % 3 == 0:
        n //= 3
    return n == 1


def _is_blank(row: int, column: int) -> bool:
    while row or column:
        if row % 3 == 1 and column % 3 == 1:
            return True
        row //= 3
        column //= 3
    return False


def star_fractal(n: int) -> list[str]:
    """An n by n carpet of stars with the centre of every 3x3 block blank."""
    if not _is_power_of_three(n):
        raise ValueError("n must be a power of 3, at least 3")
    return [
        "".join(" " if _is_blank(row, column) else "*" for column in range(n))
        for row in range(n)
    ]


def hanoi_count(n: int) -> int:
    """Number of moves needed to shift n discs."""
    return 2 ** max(n, 0) - 1


def _hanoi(source: int, spare: int, target: int, n: int) -> Iterator[tuple[int, int]]:
    if n == 1:
        yield source, target
        return
    yield from _hanoi(source, target, spare, n - 1)
    yield source, target
    yield from _hanoi(spare, source, target, n - 1)


def hanoi_moves(n: int) -> list[tuple[int, int]]:
    """Moves, as (from, to) pegs, that carry n discs from peg 1 to peg 3."""
    if n < 1:
        raise ValueError("at least one disc is required")
    return list(_hanoi(1, 2, 3, n))