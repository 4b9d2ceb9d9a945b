"""Rotations, compaction, de-duplication, unions and intersections."""

from __future__ import annotations

from collections.abc import Sequence
from heapq import merge
from itertools import groupby


def left_rotate_one(values: Sequence[int]) -> list[int]:
    """Return a copy of values rotated one place to the left."""
    items = list(values)
    if not items:
        return items
    return items[1:] + items[:1]


def left_rotate(values: Sequence[int], k: int) -> list[int]:
    """Return a copy of values rotated k places to the left; k wraps around."""
    if k < 0:
        raise ValueError("rotation must not be negative")
    items = list(values)
    if not items:
        return items
    k %= len(items)
    return items[k:] + items[:k]


def left_rotate_by_reversal(values: Sequence[int], k: int) -> list[int]:
    """Return a copy rotated k places left using three reversals.

    k must lie between 0 and the length of the sequence.
    """
    items = list(values)
    if not 0 <= k <= len(items):
        raise ValueError(f"rotation must lie in 0..{len(items)}")
    items[:k] = reversed(items[:k])
    items[k:] = reversed(items[k:])
    items.reverse()
    return items


def move_zeros_to_end(values: Sequence[int]) -> list[int]:
    """Return a copy with every zero moved to the end, order otherwise kept."""
    non_zero = [value for value in values if value != 0]
    return non_zero + [0] * (len(values) - len(non_zero))


def move_zeros_in_place(values: list[int]) -> None:
    """Move every zero in the list to its end, keeping the other order."""
    boundary = 0
    for index, value in enumerate(values):
        if value != 0:
            values[index], values[boundary] = values[boundary], values[index]
            boundary += 1


def unique_sorted(values: Sequence[int]) -> list[int]:
    """Return the distinct values in ascending order."""
    return sorted(set(values))


def dedupe_sorted_in_place(values: list[int]) -> int:
    """Drop repeats from a sorted list in place and return its new length."""
    if not values:
        return 0
    last = 0
    for value in values[1:]:
        if value != values[last]:
            last += 1
            values[last] = value
    del values[last + 1 :]
    return len(values)


def union_set(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Return the distinct values of both sequences in ascending order."""
    return sorted(set(first) | set(second))


def union_sorted(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Return the union of two sorted sequences by merging them."""
    return [value for value, _ in groupby(merge(first, second))]


def intersection(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Return values of first also in second, once each, in first's order."""
    wanted = set(second)
    seen: set[int] = set()
    common = []
    for value in first:
        if value in seen:
            continue
        seen.add(value)
        if value in wanted:
            common.append(value)
    return common


def intersection_sorted(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Return the common values of two sorted sequences with two pointers."""
    common = []
    i = j = 0
    while i < len(first) and j < len(second):
        if i > 0 and first[i] == first[i - 1]:
            i += 1
        elif first[i] < second[j]:
            i += 1
        elif first[i] > second[j]:
            j += 1
        else:
            common.append(first[i])
            i += 1
            j += 1
    return common