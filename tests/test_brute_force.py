from itertools import combinations

import pytest

from drillbook.brute_force import (
    blackjack,
    break_even_point,
    bulk_ranks,
    nth_apocalypse_number,
    smallest_generator,
)
from drillbook.strings import digit_successor


def test_blackjack_exact_hit():
    assert blackjack([5, 6, 7, 8, 9], 21) == 21


def test_blackjack_is_best_possible():
    cards = [93, 181, 245, 214, 315, 36, 185, 138, 216, 295]
    limit = 500
    result = blackjack(cards, limit)
    sums = {sum(trio) for trio in combinations(cards, 3)}
    assert result in sums
    assert result <= limit
    assert not any(result < s <= limit for s in sums)


def test_blackjack_nothing_fits():
    assert blackjack([10, 20, 30], 5) == 0


def test_smallest_generator_example():
    assert smallest_generator(216) == 198


@pytest.mark.parametrize("n", [2, 29, 101, 500, 1000])
def test_smallest_generator_is_minimal(n):
    m = smallest_generator(n)
    if m:
        assert digit_successor(m) == n
    assert all(digit_successor(k) != n for k in range(1, m or n))


def test_smallest_generator_none():
    assert smallest_generator(1) == 0


def test_bulk_ranks_example():
    people = [(55, 185), (58, 183), (88, 186), (60, 175), (46, 155)]
    assert bulk_ranks(people) == [2, 2, 1, 2, 5]


def test_bulk_ranks_equal_people_share_first_place():
    assert bulk_ranks([(70, 170)] * 4) == [1, 1, 1, 1]


def test_first_apocalypse_number():
    assert nth_apocalypse_number(1) == 666


def test_apocalypse_numbers_increase_and_contain_666():
    numbers = [nth_apocalypse_number(k) for k in range(1, 30)]
    assert numbers == sorted(set(numbers))
    assert all("666" in str(value) for value in numbers)


def test_apocalypse_number_rejects_zero():
    with pytest.raises(ValueError):
        nth_apocalypse_number(0)


def test_break_even_example():
    assert break_even_point(1000, 70, 170) == 11


@pytest.mark.parametrize("fixed, variable, price", [(1000, 70, 170), (0, 1, 2), (99, 3, 5)])
def test_break_even_is_first_profit(fixed, variable, price):
    p = break_even_point(fixed, variable, price)
    assert price * p > fixed + variable * p
    assert p == 1 or price * (p - 1) <= fixed + variable * (p - 1)


def test_break_even_never():
    assert break_even_point(3, 2, 1) == -1
    assert break_even_point(3, 2, 2) == -1