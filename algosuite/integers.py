"""Algorithms on single integers and numerals."""

from __future__ import annotations

import math

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of a 32-bit integer; 0 if the result overflows."""
    if not INT_MIN <= x <= INT_MAX:
        raise ValueError(f"{x} is not a 32-bit signed integer")
    sign = -1 if x < 0 else 1
    reversed_value = sign * int(str(abs(x))[::-1])
    return reversed_value if INT_MIN <= reversed_value <= INT_MAX else 0


def roman_to_int(s: str) -> int:
    """Value of a Roman numeral."""
    try:
        values = [_ROMAN_VALUES[char] for char in s]
    except KeyError as error:
        raise ValueError(f"invalid Roman numeral character {error.args[0]!r}") from None
    following = values[1:] + [0]
    return sum(-value if value < after else value for value, after in zip(values, following))


def divide(dividend: int, divisor: int) -> int:
    """Quotient truncated toward zero, clamped to the 32-bit signed maximum."""
    if divisor == 0:
        raise ZeroDivisionError("integer division by zero")
    if dividend == divisor:
        return 1
    positive = (dividend < 0) == (divisor < 0)
    remaining, step = abs(dividend), abs(divisor)
    quotient = 0
    while remaining >= step:
        shift = 0
        while remaining > step << (shift + 1):
            shift += 1
        quotient += 1 << shift
        remaining -= step << shift
    return min(quotient, INT_MAX) if positive else -quotient


def is_power_of_two(n: int) -> bool:
    """Whether ``n`` is a positive power of two."""
    return n > 0 and n & (n - 1) == 0


def add_digits(num: int) -> int:
    """Digital root: repeatedly sum the digits until one digit remains."""
    if num < 0:
        raise ValueError("add_digits() needs a non-negative number")
    return 0 if num == 0 else 1 + (num - 1) % 9


def bulb_switch(n: int) -> int:
    """Bulbs left on after ``n`` rounds of toggling: the count of perfect squares up to ``n``."""
    if n < 0:
        raise ValueError("bulb_switch() needs a non-negative number")
    return math.isqrt(n)


def kth_grammar(n: int, k: int) -> int:
    """Symbol ``k`` (1-based) of row ``n`` in the 0 -> 01, 1 -> 10 grammar."""
    if n < 1 or not 1 <= k <= 2 ** (n - 1):
        raise ValueError(f"no symbol {k} in row {n}")
    flipped = 0
    while n > 1 and k > 1:
        half = 2 ** (n - 2)
        if k > half:
            k -= half
            flipped ^= 1
        n -= 1
    return flipped