"""Practice drills on small lists of numbers and star patterns."""

from collections.abc import Iterable, Sequence


def average_score(scores: Sequence[int]) -> int:
    """Integer average after raising every score below 40 to 40."""
    if not scores:
        raise ValueError("at least one score is required")
    return sum(max(score, 40) for score in scores) // len(scores)


def cheapest_set(burgers: Iterable[int], drinks: Iterable[int]) -> int:
    """Price of the cheapest burger-and-drink set, 50 off."""
    return min(burgers) + min(drinks) - 50


def middle_number(a: int, b: int, c: int) -> int:
    """The median of three numbers."""
    return sorted((a, b, c))[1]


def arrow_stars(n: int) -> list[str]:
    """Rows growing from 1 to n stars and shrinking back to 1."""
    widths = [*range(1, n + 1), *range(n - 1, 0, -1)]
    return ["*" * width for width in widths]


def hourglass_stars(n: int) -> list[str]:
    """Centred hourglass: 2n-1 stars narrowing to 1 and widening again."""
    top = [" " * p + "*" * (2 * (n - p) - 1) for p in range(n - 1)]
    pad = max(n - 1, 0)
    narrowest = 2 * n - 1 - 2 * pad
    bottom = [
        " " * (pad - k) + "*" * max(narrowest + 2 * k, 0)
        for k in range(pad + 1)
    ]
    return top + bottom


def _checker_row(width: int, star_on_odd: bool) -> str:
    return "".join(
        "*" if (column % 2 == 1) == star_on_odd else " "
        for column in range(1, width + 1)
    )


def checker_stars(n: int) -> list[str]:
    """A 2n-row checkerboard of stars for 0 <= n <= 100."""
    if not 0 <= n <= 100:
        raise ValueError("Wrong range. (1 <= n <= 100)")
    if n == 1:
        return ["*"]
    odd_width, even_width = (n - 1, n) if n % 2 == 0 else (n, n - 1)
    return [
        _checker_row(odd_width, True) if line % 2 == 1 else _checker_row(even_width, False)
        for line in range(1, 2 * n + 1)
    ]


def min_max(values: Iterable[int]) -> tuple[int, int]:
    """Smallest and largest value, starting from 1000000 and -1000000."""
    smallest, largest = 1_000_000, -1_000_000
    for value in values:
        smallest = min(smallest, value)
        largest = max(largest, value)
    return smallest, largest


def find_max(values: Iterable[int]) -> tuple[int, int]:
    """First strictly largest positive value and its 1-based position, else (0, -1)."""
    best, position = 0, -1
    for index, value in enumerate(values, start=1):
        if value > best:
            best, position = value, index
    return best, position


def digit_counts(a: int, b: int, c: int) -> list[int]:
    """How often each digit 0-9 occurs in a*b*c.

    A single-digit product also counts one leading zero.
    """
    product = a * b * c
    if product < 0:
        raise ValueError("the product must not be negative")
    counts = [0] * 10
    while True:
        product, digit = divmod(product, 10)
        counts[digit] += 1
        if product < 10:
            counts[product] += 1
            return counts


def distinct_remainders(values: Iterable[int]) -> int:
    """Number of different remainders modulo 42."""
    remainders = set()
    for value in values:
        if value < 0:
            raise ValueError("values must not be negative")
        remainders.add(value % 42)
    return len(remainders)


def adjusted_average(scores: Sequence[int]) -> float:
    """Average after rescaling every score as score / highest * 100."""
    if not scores:
        raise ValueError("at least one score is required")
    highest = max(-1, *scores)
    return sum(score / highest * 100 for score in scores) / len(scores)


def ox_score(answers: str) -> int:
    """Quiz score where each 'O' earns the length of its current run."""
    score = streak = 0
    for mark in answers:
        streak = streak + 1 if mark == "O" else 0
        score += streak
    return score


def above_average_ratio(scores: Sequence[int]) -> float:
    """Percentage of scores strictly above the mean."""
    if not scores:
        raise ValueError("at least one score is required")
    mean = sum(scores) / len(scores)
    above = sum(1 for score in scores if score > mean)
    return above / len(scores) * 100.0