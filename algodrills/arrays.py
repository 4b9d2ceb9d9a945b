"""Searches and summaries over sequences of integers."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise


def _require_values(values: Sequence[int]) -> None:
    if not values:
        raise ValueError("sequence must not be empty")


def largest_element(values: Sequence[int]) -> int:
    """Return the largest value in a non-empty sequence."""
    _require_values(values)
    largest = values[0]
    for value in values:
        if value > largest:
            largest = value
    return largest


def second_largest(values: Sequence[int]) -> int | None:
    """Return the largest value strictly below the maximum, or None.

    Finds the maximum first, then scans again for the best distinct value.
    """
    largest = largest_element(values)
    return max((value for value in values if value != largest), default=None)


def second_largest_sorted(values: Sequence[int]) -> int | None:
    """Return the second largest distinct value by sorting a copy."""
    _require_values(values)
    ordered = sorted(values)
    largest = ordered[-1]
    for value in reversed(ordered):
        if value != largest:
            return value
    return None


def second_largest_single_pass(values: Sequence[int]) -> int | None:
    """Return the second largest distinct value in one pass."""
    _require_values(values)
    largest = values[0]
    second: int | None = None
    for value in values[1:]:
        if value > largest:
            second = largest
            largest = value
        elif value != largest and (second is None or value > second):
            second = value
    return second


def is_sorted(values: Sequence[int]) -> bool:
    """Return True when the sequence is in non-decreasing order."""
    return all(earlier <= later for earlier, later in pairwise(values))


def linear_search(values: Sequence[int], target: int) -> int | None:
    """Return the index of the first occurrence of target, or None."""
    for index, value in enumerate(values):
        if value == target:
            return index
    return None


def _known_values(values: Sequence[int], n: int) -> Sequence[int]:
    """Return the n - 1 values drawn from 1..n that the search looks at."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if len(values) < n - 1:
        raise ValueError(f"expected at least {n - 1} values, got {len(values)}")
    return values[: n - 1]


def missing_number(values: Sequence[int], n: int) -> int:
    """Return the number of 1..n absent from values, using the series sum."""
    known = _known_values(values, n)
    return n * (n + 1) // 2 - sum(known)


def missing_number_brute(values: Sequence[int], n: int) -> int:
    """Return the smallest number of 1..n absent from values by scanning."""
    known = _known_values(values, n)
    for candidate in range(1, n + 1):
        if candidate not in known:
            return candidate
    raise ValueError("no number in range is missing")


def missing_number_hash(values: Sequence[int], n: int) -> int:
    """Return the smallest number of 1..n absent from values using a tally."""
    known = _known_values(values, n)
    seen = [0] * (n + 1)
    for value in known:
        if not 0 <= value <= n:
            raise ValueError(f"value {value} outside 0..{n}")
        seen[value] += 1
    for candidate in range(1, n + 1):
        if seen[candidate] == 0:
            return candidate
    raise ValueError("no number in range is missing")


def missing_number_xor(values: Sequence[int], n: int) -> int:
    """Return the number of 1..n absent from values using XOR."""
    known = _known_values(values, n)
    expected = n
    actual = 0
    for position, value in enumerate(known, start=1):
        actual ^= value
        expected ^= position
    return expected ^ actual