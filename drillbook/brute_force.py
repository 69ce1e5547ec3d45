"""Brute-force drills: card sums, digit generators, ranks and counting."""

from collections.abc import Iterable, Sequence
from itertools import combinations, count

from drillbook.strings import digit_successor


def blackjack(cards: Iterable[int], limit: int) -> int:
    """Largest sum of three different cards not above limit, or 0."""
    return max(
        (sum(trio) for trio in combinations(cards, 3) if sum(trio) <= limit),
        default=0,
    )


def smallest_generator(n: int) -> int:
    """Smallest m below n with m plus its digits equal to n, or 0."""
    return next((m for m in range(1, n) if digit_successor(m) == n), 0)


def bulk_ranks(people: Sequence[tuple[int, int]]) -> list[int]:
    """Rank of each (weight, height): one plus the number strictly bigger in both."""
    return [
        1 + sum(1 for w, h in people if weight < w and height < h)
        for weight, height in people
    ]


def nth_apocalypse_number(n: int) -> int:
    """The n-th smallest number whose decimal form contains '666'."""
    if n < 1:
        raise ValueError("n must be at least 1")
    found = 0
    for candidate in count(1):
        if "666" in str(candidate):
            found += 1
            if found == n:
                return candidate
    raise AssertionError("unreachable")


def break_even_point(fixed_cost: int, variable_cost: int, price: int) -> int:
    """First sales volume at which revenue exceeds cost, or -1 if never."""
    if variable_cost >= price:
        return -1
    return max(fixed_cost // (price - variable_cost) + 1, 1)