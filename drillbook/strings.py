"""Function and string drills: sums, self numbers, words and letters."""

import re
from collections import Counter
from collections.abc import Iterable
from string import ascii_letters, ascii_lowercase, ascii_uppercase

_DIAL_GROUPS = (
    ("ABC", 3),
    ("DEF", 4),
    ("GHI", 5),
    ("JKL", 6),
    ("MNO", 7),
    ("PQRS", 8),
    ("TUV", 9),
    ("WXYZ", 10),
)
_DIAL_SECONDS = {letter: seconds for group, seconds in _DIAL_GROUPS for letter in group}

_CROATIAN_LETTER = re.compile(r"c=|c-|dz=|d-|lj|nj|s=|z=|.", re.DOTALL)


def total(values: Iterable[int]) -> int:
    """Sum of all values."""
    return sum(values)


def digit_successor(n: int) -> int:
    """n plus the sum of its decimal digits."""
    if n < 0:
        raise ValueError("n must not be negative")
    return n + sum(int(digit) for digit in str(n))


def self_numbers(limit: int = 10000) -> list[int]:
    """Numbers from 1 to limit that no number generates by digit_successor."""
    generated = {digit_successor(n) for n in range(1, limit + 1)}
    return [n for n in range(1, limit + 1) if n not in generated]


def is_hansoo(n: int) -> bool:
    """True when the digits of n below 1000 form an arithmetic sequence."""
    if n < 100:
        return True
    if n < 1000:
        hundreds, tens, ones = n // 100, n // 10 % 10, n % 10
        return hundreds - tens == tens - ones
    return False


def count_hansoo(n: int) -> int:
    """How many numbers from 1 to n are hansoo."""
    return sum(1 for i in range(1, n + 1) if is_hansoo(i))


def is_group_word(word: str) -> bool:
    """True when every letter appears in a single consecutive run."""
    seen: set[str] = set()
    previous = None
    for char in word:
        if char in seen and char != previous:
            return False
        seen.add(char)
        previous = char
    return True


def count_group_words(words: Iterable[str]) -> int:
    return sum(1 for word in words if is_group_word(word))


def ascii_code(char: str) -> int:
    """Character code of a single character."""
    if len(char) != 1:
        raise ValueError("exactly one character is required")
    return ord(char)


def digit_sum(digits: str) -> int:
    """Sum of the digit characters; any other character counts as zero."""
    return sum(int(char) for char in digits if char in "0123456789")


def first_positions(word: str) -> list[int]:
    """First index of each letter a to z in the word, or -1 when absent."""
    return [word.find(letter) for letter in ascii_lowercase]


def repeat_chars(text: str, times: int) -> str:
    """Each character of text repeated the given number of times."""
    return "".join(char * times for char in text)


def most_frequent_letter(text: str) -> str:
    """Most used letter, case-insensitive, in upper case; '?' on a tie."""
    counts = Counter(char.upper() for char in text if char in ascii_letters)
    top = max(counts.values(), default=0)
    leaders = [letter for letter in ascii_uppercase if counts[letter] == top]
    return leaders[0] if len(leaders) == 1 else "?"


def count_words(text: str) -> int:
    """Number of whitespace-separated words."""
    return len(text.split())


def reverse_digits(n: int) -> int:
    """Reverse the digits of a three-digit number."""
    if n < 0:
        raise ValueError("n must not be negative")
    hundreds, tens, ones = n // 100, n // 10 % 10, n % 10
    return ones * 100 + tens * 10 + hundreds


def larger_reversed(a: int, b: int) -> int:
    """The larger of the two numbers after reversing their digits."""
    a, b = reverse_digits(a), reverse_digits(b)
    return a if a > b else b


def dial_time(word: str) -> int:
    """Seconds needed to dial an upper-case word on a rotary phone."""
    try:
        return sum(_DIAL_SECONDS[letter] for letter in word)
    except KeyError as exc:
        raise ValueError(f"not an upper-case letter: {exc.args[0]!r}") from None


def count_croatian(word: str) -> int:
    """Number of letters in a word written in the Croatian alphabet."""
    return len(_CROATIAN_LETTER.findall(word))