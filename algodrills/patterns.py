"""Text patterns of stars, numbers and letters, returned as lists of rows."""

from __future__ import annotations

_FIRST_LETTER = ord("A")


def _letter(offset: int) -> str:
    return chr(_FIRST_LETTER + offset)


def _spaced(items) -> str:
    """Join items with each one followed by a single space."""
    return "".join(f"{item} " for item in items)


def _half_widths(n: int) -> list[int]:
    """Return 1, 2, ..., n, ..., 2, 1: the widths of a rising and falling shape."""
    return [i if i <= n else 2 * n - i for i in range(1, 2 * n)]


def star_square(n: int) -> list[str]:
    """Return an n by n square of stars, each star followed by a space."""
    return ["* " * n for _ in range(n)]


def star_triangle(n: int) -> list[str]:
    """Return a right triangle of stars with rows of 1 to n stars."""
    return ["* " * row for row in range(1, n + 1)]


def number_triangle(n: int) -> list[str]:
    """Return rows counting 1..i for i from 1 to n."""
    return [_spaced(range(1, row + 1)) for row in range(1, n + 1)]


def repeated_number_triangle(n: int) -> list[str]:
    """Return rows where row i repeats the number i, i times."""
    return [f"{row} " * row for row in range(1, n + 1)]


def inverted_number_triangle(n: int) -> list[str]:
    """Return rows counting 1..i for i from n down to 1."""
    return [_spaced(range(1, n - row + 1)) for row in range(n)]


def star_pyramid(n: int) -> list[str]:
    """Return a centred pyramid of stars, n rows high, padded on both sides."""
    rows = []
    for row in range(n):
        pad = " " * (n - row - 1)
        rows.append(pad + "*" * (2 * row + 1) + pad)
    return rows


def inverted_star_pyramid(n: int) -> list[str]:
    """Return a centred upside-down pyramid of stars, padded on both sides."""
    rows = []
    for row in range(n):
        pad = " " * row
        rows.append(pad + "*" * (2 * n - (2 * row + 1)) + pad)
    return rows


def star_diamond(n: int) -> list[str]:
    """Return a pyramid followed by its inverted twin."""
    return star_pyramid(n) + inverted_star_pyramid(n)


def half_diamond(n: int) -> list[str]:
    """Return rows of stars growing from 1 to n and shrinking back to 1."""
    return ["*" * width for width in _half_widths(n)]


def binary_triangle(n: int) -> list[str]:
    """Return a triangle of alternating 1s and 0s; even rows start with 1."""
    rows = []
    for row in range(n):
        start = 1 if row % 2 == 0 else 0
        rows.append("".join(str((start + col) % 2) for col in range(row + 1)))
    return rows


def number_crown(n: int) -> list[str]:
    """Return rows of 1..i, a gap, then i..1, the gap closing row by row."""
    rows = []
    for row in range(1, n + 1):
        rising = "".join(str(digit) for digit in range(1, row + 1))
        falling = "".join(str(digit) for digit in range(row, 0, -1))
        rows.append(rising + " " * (2 * (n - row)) + falling)
    return rows


def increasing_number_triangle(n: int) -> list[str]:
    """Return a triangle numbered consecutively from 1 across all rows."""
    rows = []
    start = 1
    for row in range(1, n + 1):
        rows.append(_spaced(range(start, start + row)))
        start += row
    return rows


def letter_triangle(n: int) -> list[str]:
    """Return rows of letters from A, growing by one letter per row."""
    return [_spaced(_letter(k) for k in range(row + 1)) for row in range(n)]


def inverted_letter_triangle(n: int) -> list[str]:
    """Return rows of letters from A, shrinking by one letter per row."""
    return [_spaced(_letter(k) for k in range(n - row)) for row in range(n)]


def letter_ramp(n: int) -> list[str]:
    """Return rows where row i repeats the i-th letter i times."""
    return [f"{_letter(row)} " * (row + 1) for row in range(n)]


def letter_hill(n: int) -> list[str]:
    """Return a centred hill of letters rising from A to a peak and back."""
    rows = []
    for row in range(n):
        pad = " " * (n - row - 1)
        letters = [_letter(k) for k in range(row + 1)]
        rows.append(pad + "".join(letters) + "".join(reversed(letters[:-1])) + pad)
    return rows


def letter_tail_triangle(n: int) -> list[str]:
    """Return rows ending at the n-th letter, each starting one letter earlier."""
    last = n - 1
    return [_spaced(_letter(k) for k in range(last - row, last + 1)) for row in range(n)]


def symmetric_void(n: int) -> list[str]:
    """Return two star walls with a diamond-shaped hole between them."""
    top = [
        "*" * (n - row) + " " * (2 * row) + "*" * (n - row) for row in range(n)
    ]
    bottom = [
        "*" * row + " " * (2 * n - 2 * row) + "*" * row for row in range(1, n + 1)
    ]
    return top + bottom


def butterfly(n: int) -> list[str]:
    """Return two star wings that meet in the middle row."""
    return [
        "*" * width + " " * (2 * n - 2 * width) + "*" * width
        for width in _half_widths(n)
    ]


def hollow_square(n: int) -> list[str]:
    """Return an n by n square outline of stars."""
    rows = []
    for row in range(n):
        rows.append(
            "".join(
                "*" if row in (0, n - 1) or col in (0, n - 1) else " "
                for col in range(n)
            )
        )
    return rows


def concentric_numbers(n: int) -> list[str]:
    """Return nested square rings numbered n on the outside down to 1 inside."""
    size = 2 * n - 1
    edge = size - 1
    return [
        _spaced(n - min(row, col, edge - row, edge - col) for col in range(size))
        for row in range(size)
    ]