"""Input/output and conditional drills: arithmetic, comparisons and small rules."""

_CAT = (
    "\\    /\\",
    " )  ( ')",
    "(  /  )",
    " \\(__)|",
)

_DOG = (
    "|\\_/|",
    "|q p|   /}",
    '( 0 )"""\\',
    '|"^"`    |',
    "||_/=\\\\__|",
)


def _c_div(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


def _c_mod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    return a - b * _c_div(a, b)


def hello_world() -> str:
    """Return the classic greeting."""
    return "Hello World!"


def cat_art() -> str:
    """Return the ASCII-art cat, one line per row, newline terminated."""
    return "".join(line + "\n" for line in _CAT)


def dog_art() -> str:
    """Return the ASCII-art dog, one line per row, newline terminated."""
    return "".join(line + "\n" for line in _DOG)


def add(a: int, b: int) -> int:
    return a + b


def subtract(a: int, b: int) -> int:
    return a - b


def multiply(a: int, b: int) -> int:
    return a * b


def divide(a: float, b: float) -> float:
    """Floating-point quotient; raises ZeroDivisionError when b is zero."""
    return a / b


def arithmetic(a: int, b: int) -> tuple[int, int, int, int, int]:
    """Return sum, difference, product, truncated quotient and remainder."""
    return a + b, a - b, a * b, _c_div(a, b), _c_mod(a, b)


def remainders(a: int, b: int, c: int) -> tuple[int, int, int, int]:
    """Show how remainders distribute over addition and multiplication."""
    return (
        _c_mod(a + b, c),
        _c_mod(_c_mod(a, c) + _c_mod(b, c), c),
        _c_mod(a * b, c),
        _c_mod(_c_mod(a, c) * _c_mod(b, c), c),
    )


def multiplication_steps(a: int, b: int) -> tuple[int, int, int, int]:
    """Long multiplication of a by a three-digit b: three partial rows and the total."""
    ones = a * _c_mod(b, 10)
    tens = a * _c_div(_c_mod(b, 100) - _c_mod(b, 10), 10)
    hundreds = a * _c_div(b, 100)
    return ones, tens, hundreds, ones + tens * 10 + hundreds * 100


def compare(a: int, b: int) -> str:
    """Return '>', '<' or '==' describing how a relates to b."""
    if a > b:
        return ">"
    if a < b:
        return "<"
    return "=="


def grade(score: int) -> str:
    """Map a score from 0 to 100 to a letter grade."""
    if 90 <= score <= 100:
        return "A"
    if 80 <= score < 90:
        return "B"
    if 70 <= score < 80:
        return "C"
    if 60 <= score < 70:
        return "D"
    if 0 <= score < 60:
        return "F"
    raise ValueError("Invalid Score.")


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule for years 1 to 4000."""
    if not 1 <= year <= 4000:
        raise ValueError("year must be in range 1 ~ 4000")
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def quadrant(x: int, y: int) -> int:
    """Quadrant number of a point off the axes within [-1000, 1000]."""
    if x == 0 or y == 0 or not -1000 <= x <= 1000 or not -1000 <= y <= 1000:
        raise ValueError("Wrong range.")
    if x > 0 and y > 0:
        return 1
    if x < 0 and y > 0:
        return 2
    if x < 0 and y < 0:
        return 3
    return 4


def alarm_time(hour: int, minute: int) -> tuple[int, int]:
    """Return the time 45 minutes earlier, wrapping past midnight."""
    if not (0 <= hour <= 23 and 0 <= minute <= 59):
        raise ValueError("Wrong range")
    if minute >= 45:
        return hour, minute - 45
    return (23 if hour == 0 else hour - 1), minute + 15