"""Small sequence builders: counting, series, factorials and palindromes."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def fibonacci_series(n: int) -> list[int]:
    """Return the Fibonacci numbers from the 0th term up to the nth."""
    if n < 0:
        raise ValueError("n must not be negative")
    series = [0, 1]
    while len(series) <= n:
        series.append(series[-1] + series[-2])
    return series[: n + 1]


def is_palindrome(text: str) -> bool:
    """Return True when the letters and digits of text read the same both ways.

    Case is ignored and every other character is skipped.
    """
    cleaned = [char.lower() for char in text if char.isalnum()]
    return cleaned == cleaned[::-1]


def count_up(n: int) -> list[int]:
    """Return the numbers 1 to n in ascending order."""
    return list(range(1, n + 1))


def count_down(n: int) -> list[int]:
    """Return the numbers n down to 1."""
    return list(range(n, 0, -1))


def repeat_name(name: str, n: int) -> list[str]:
    """Return name repeated n times."""
    return [name] * max(n, 0)


def count_from_zero(limit: int) -> list[int]:
    """Return the numbers from 0 up to, but not including, limit."""
    return list(range(limit))


def factorial(x: int) -> int:
    """Return the product of 1..x; zero and below give 1."""
    return math.prod(range(1, x + 1))


def reversed_array(values: Sequence[T]) -> list[T]:
    """Return a reversed copy of values."""
    return list(reversed(values))


def sum_first(n: int) -> int:
    """Return the sum of the numbers 1..n; zero and below give 0."""
    return sum(range(1, n + 1))