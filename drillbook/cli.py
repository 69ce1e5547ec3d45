"""Command line: add pairs of integers read from standard input."""

import argparse
import sys
from collections.abc import Sequence

from drillbook.basics import add
from drillbook.loops import pair_sums


def _read_ints(text: str) -> list[int]:
    try:
        return [int(token) for token in text.split()]
    except ValueError:
        raise ValueError("input must be whitespace-separated integers") from None


def _pairs(numbers: Sequence[int]) -> list[tuple[int, int]]:
    if len(numbers) % 2:
        raise ValueError("input must hold whole pairs of integers")
    return list(zip(numbers[::2], numbers[1::2]))


def _sums(mode: str, numbers: list[int]) -> list[int]:
    if mode == "sum":
        if len(numbers) < 2:
            raise ValueError("two integers are required")
        return [add(numbers[0], numbers[1])]
    if mode == "cases":
        if not numbers:
            raise ValueError("the number of cases is required")
        cases, rest = numbers[0], numbers[1:]
        if cases < 0 or len(rest) < 2 * cases:
            raise ValueError(f"expected {cases} pairs of integers")
        return pair_sums(_pairs(rest[: 2 * cases]))
    return pair_sums(_pairs(numbers))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="drillbook",
        description="Add pairs of integers read from standard input.",
    )
    parser.add_argument(
        "mode",
        nargs="?",
        default="eof",
        choices=("sum", "cases", "eof"),
        help="sum: one pair; cases: a count then that many pairs; "
        "eof: pairs until the input ends (default)",
    )
    args = parser.parse_args(argv)
    try:
        sums = _sums(args.mode, _read_ints(sys.stdin.read()))
    except ValueError as exc:
        print(f"drillbook: {exc}", file=sys.stderr)
        return 1
    for value in sums:
        print(value)
    return 0