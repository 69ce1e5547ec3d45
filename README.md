# drillbook

A collection of small, self-contained solutions to classic programming
drills, grouped by topic:

- `drillbook.basics` – arithmetic (`add`, `subtract`, `multiply`,
  `divide`, `arithmetic`, `remainders`, `multiplication_steps`),
  `compare`, `grade`, `is_leap_year`, `quadrant` and `alarm_time`,
  plus `hello_world`, `cat_art` and `dog_art`.
- `drillbook.loops` – `multiplication_table`, `pair_sums`, `sum_to`,
  `count_up`, `count_down`, `case_sums`, `case_equations`,
  `left_triangle`, `right_triangle`, `less_than`, `sums_until_zero` and
  `addition_cycle_length`.
- `drillbook.practice` – `average_score`, `cheapest_set`,
  `middle_number`, `min_max`, `find_max`, `digit_counts`,
  `distinct_remainders`, `adjusted_average`, `ox_score`,
  `above_average_ratio` and the star patterns `arrow_stars`,
  `hourglass_stars` and `checker_stars`.
- `drillbook.strings` – `total`, `digit_successor`, `self_numbers`,
  `is_hansoo`, `count_hansoo`, `is_group_word`, `count_group_words`,
  `ascii_code`, `digit_sum`, `first_positions`, `repeat_chars`,
  `most_frequent_letter`, `count_words`, `reverse_digits`,
  `larger_reversed`, `dial_time` and `count_croatian`.
- `drillbook.recursion` – `factorial`, `fibonacci`, `star_fractal`,
  `hanoi_count` and `hanoi_moves`.
- `drillbook.brute_force` – `blackjack`, `smallest_generator`,
  `bulk_ranks`, `nth_apocalypse_number` and `break_even_point`.

Star patterns and tables come back as lists of lines; results that
come in several parts come back as tuples.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from drillbook.basics import is_leap_year
from drillbook.recursion import factorial, hanoi_count, hanoi_moves
from drillbook.strings import count_croatian

is_leap_year(2000)           # True
factorial(5)                 # 120
hanoi_count(3)               # 7
hanoi_moves(2)               # [(1, 2), (1, 3), (2, 3)]
count_croatian("ljes=njak")  # 6
```

Invalid input, such as a score outside 0–100 for `grade` or a year
outside 1–4000 for `is_leap_year`, raises `ValueError` rather than
printing an error message.

## Command line

The `drillbook` command reads whitespace-separated integers from
standard input and prints one sum per line. It takes one optional
mode:

- `eof` (the default) – pairs of integers until the input ends; the
  sum of each pair is printed.
- `cases` – a count first, then that many pairs; the sum of each pair
  is printed.
- `sum` – one pair; its sum is printed.

```
printf '1 2\n3 4\n' | drillbook
printf '2\n1 2\n3 4\n' | drillbook cases
printf '5 7\n' | drillbook sum
```

Input that is not integers, or that does not hold whole pairs, is
reported on standard error and the command exits with status 1.

## What it does not do

Only the pair-adding drills have a command. Every other drill is a
library function: there is no command that reads its input and prints
its answer.