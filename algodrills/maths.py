"""Digit tricks, primality, divisors and greatest common divisors."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Sequence


def _digits(n: int) -> list[int]:
    """Return the decimal digits of a positive integer, least significant first."""
    digits = []
    while n > 0:
        n, last = divmod(n, 10)
        digits.append(last)
    return digits


def is_armstrong(num: int) -> bool:
    """Return True when num equals the sum of its digits raised to its length."""
    if num < 0:
        return False
    power = len(str(num))
    return sum(digit**power for digit in _digits(num)) == num


def is_palindrome_number(n: int) -> bool:
    """Return True when the decimal digits of n read the same both ways."""
    if n < 0:
        return False
    return reverse_digits(n) == n


def is_prime(n: int) -> bool:
    """Return True when n has exactly two divisors, testing up to its root."""
    if n < 2:
        return False
    count = 0
    for candidate in range(1, math.isqrt(n) + 1):
        if n % candidate == 0:
            count += 1 if candidate * candidate == n else 2
    return count == 2


def is_prime_trial(n: int) -> bool:
    """Return True when n has exactly two divisors, testing every candidate."""
    return sum(1 for candidate in range(1, n + 1) if n % candidate == 0) == 2


def count_digits(n: int) -> int:
    """Return the number of decimal digits of n; zero and below give 0."""
    return len(_digits(n))


def count_digits_log(n: int) -> int:
    """Return the number of decimal digits of a positive n via its logarithm."""
    if n <= 0:
        raise ValueError("logarithm needs a positive number")
    return int(math.log10(n)) + 1


def divisors(n: int) -> list[int]:
    """Return every divisor of n in ascending order."""
    if n < 0:
        raise ValueError("n must not be negative")
    return [candidate for candidate in range(1, n + 1) if n % candidate == 0]


def divisors_paired(n: int) -> list[int]:
    """Return the divisors of n as pairs (d, n // d) found up to its root."""
    if n < 0:
        raise ValueError("n must not be negative")
    found = []
    for candidate in range(1, math.isqrt(n) + 1):
        if n % candidate == 0:
            found.append(candidate)
            partner = n // candidate
            if partner != candidate:
                found.append(partner)
    return found


def _check_non_negative(a: int, b: int) -> None:
    if a < 0 or b < 0:
        raise ValueError("numbers must not be negative")


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor by repeated remainders."""
    _check_non_negative(a, b)
    while a > 0 and b > 0:
        if a > b:
            a %= b
        else:
            b %= a
    return b if a == 0 else a


def gcd_descending(a: int, b: int) -> int:
    """Return the greatest common divisor by counting down from the smaller."""
    _check_non_negative(a, b)
    for candidate in range(min(a, b), 0, -1):
        if a % candidate == 0 and b % candidate == 0:
            return candidate
    return 1


def gcd_brute(a: int, b: int) -> int:
    """Return the greatest common divisor by testing every candidate."""
    _check_non_negative(a, b)
    best = 1
    for candidate in range(1, min(a, b) + 1):
        if a % candidate == 0 and b % candidate == 0:
            best = candidate
    return best


def reverse_digits(n: int) -> int:
    """Return n with its decimal digits reversed; zero and below give 0."""
    result = 0
    for digit in _digits(n):
        result = result * 10 + digit
    return result


def main(argv: Sequence[str] | None = None) -> int:
    """Print a number with its digits reversed, read from argv or stdin."""
    parser = argparse.ArgumentParser(description="Reverse the digits of a number.")
    parser.add_argument("number", nargs="?", type=int, help="number to reverse")
    args = parser.parse_args(argv)
    number = args.number
    if number is None:
        text = sys.stdin.read().split()
        if not text:
            parser.error("no number given")
        try:
            number = int(text[0])
        except ValueError:
            parser.error(f"not a number: {text[0]!r}")
    print(reverse_digits(number))
    return 0