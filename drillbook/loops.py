"""Loop drills: tables, running sums, sequences and star triangles."""

from collections.abc import Iterable


def multiplication_table(dan: int) -> list[str]:
    """Rows of the times table for one factor between 1 and 9."""
    if not 1 <= dan <= 9:
        raise ValueError("the times table covers factors 1 to 9")
    return [f"{dan} * {i} = {dan * i}" for i in range(1, 10)]


def pair_sums(pairs: Iterable[tuple[int, int]]) -> list[int]:
    """Sum of each pair."""
    return [a + b for a, b in pairs]


def sum_to(n: int) -> int:
    """Sum of the integers from 1 to n (0 when n < 1)."""
    return sum(range(1, n + 1))


def count_up(n: int) -> list[int]:
    return list(range(1, n + 1))


def count_down(n: int) -> list[int]:
    return list(range(n, 0, -1))


def case_sums(pairs: Iterable[tuple[int, int]]) -> list[str]:
    """'Case #k: sum' lines, numbered from 1."""
    return [f"Case #{k}: {a + b}" for k, (a, b) in enumerate(pairs, start=1)]


def case_equations(pairs: Iterable[tuple[int, int]]) -> list[str]:
    """'Case #k: a + b = sum' lines, numbered from 1."""
    return [
        f"Case #{k}: {a} + {b} = {a + b}"
        for k, (a, b) in enumerate(pairs, start=1)
    ]


def left_triangle(n: int) -> list[str]:
    """Left-aligned triangle of stars, one more per row."""
    return ["*" * i for i in range(1, n + 1)]


def right_triangle(n: int) -> list[str]:
    """Right-aligned triangle of stars padded to width n."""
    return [" " * (n - i) + "*" * i for i in range(1, n + 1)]


def less_than(values: Iterable[int], limit: int) -> list[int]:
    """Values below the limit, in their original order."""
    return [value for value in values if value < limit]


def sums_until_zero(pairs: Iterable[tuple[int, int]]) -> list[int]:
    """Sums of pairs up to, not including, the first (0, 0) pair."""
    sums = []
    for a, b in pairs:
        if a == 0 and b == 0:
            break
        sums.append(a + b)
    return sums


def addition_cycle_length(start: int) -> int:
    """Steps of the digit-addition cycle needed to return to start (0-99)."""
    if not 0 <= start <= 99:
        raise ValueError("Wrong Input(range : 0~99).")
    current = start
    steps = 0
    while True:
        tens, ones = divmod(current, 10)
        current = ones * 10 + (tens + ones) % 10
        steps += 1
        if current == start:
            return steps