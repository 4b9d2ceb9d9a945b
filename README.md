# algodrills

Classic programming drills written as plain, tested Python functions. The
drills cover array operations, number theory, small counting and recursion
exercises, and text patterns. The package needs nothing beyond the standard
library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `algodrills.arrays`

Searches and summaries over sequences of integers.

- `largest_element(values)` returns the maximum. It raises `ValueError` on an
  empty sequence.
- `second_largest(values)`, `second_largest_sorted(values)` and
  `second_largest_single_pass(values)` return the largest value strictly
  below the maximum. They return `None` when there is no such value.
- `is_sorted(values)` tells whether the sequence is in non-decreasing order.
- `linear_search(values, target)` returns the index of the first match, or
  `None`.
- `missing_number(values, n)`, `missing_number_brute(values, n)`,
  `missing_number_hash(values, n)` and `missing_number_xor(values, n)` find
  the number of `1..n` that is absent from the first `n - 1` values.

### `algodrills.transform`

Functions that rearrange or combine sequences.

- `left_rotate_one(values)` rotates a copy one place to the left.
- `left_rotate(values, k)` rotates a copy `k` places to the left. `k` wraps
  around the length, and a negative `k` raises `ValueError`.
- `left_rotate_by_reversal(values, k)` rotates a copy using three reversals.
  `k` must lie between 0 and the length of the sequence.
- `move_zeros_to_end(values)` returns a copy with the zeros moved to the end.
  `move_zeros_in_place(values)` does the same to the list it is given.
- `unique_sorted(values)` returns the distinct values in ascending order.
- `dedupe_sorted_in_place(values)` removes repeats from a sorted list in
  place and returns the new length.
- `union_set(first, second)` and `union_sorted(first, second)` return the
  union of two sequences. The second one merges two sorted sequences.
- `intersection(first, second)` and `intersection_sorted(first, second)`
  return the common values. The second one works on sorted input with two
  pointers.

### `algodrills.maths`

Number functions.

- Tests: `is_armstrong`, `is_palindrome_number`, `is_prime`,
  `is_prime_trial`.
- Digits: `count_digits`, `count_digits_log`, `reverse_digits`.
- Divisors: `divisors(n)` returns them in ascending order.
  `divisors_paired(n)` returns them as `d, n // d` pairs found up to the
  square root of `n`.
- Greatest common divisor: `gcd`, `gcd_descending`, `gcd_brute`. Each one
  raises `ValueError` for negative input.

### `algodrills.recursion`

Small sequence builders.

- `fibonacci_series(n)` returns the terms from the 0th up to the nth.
- `is_palindrome(text)` checks only the letters and digits of the text and
  ignores case.
- Counting: `count_up(n)`, `count_down(n)`, `count_from_zero(limit)`.
- `repeat_name(name, n)` returns the name repeated `n` times.
- `factorial(x)`, `sum_first(n)` and `reversed_array(values)` return the
  factorial, the sum of `1..n` and a reversed copy.

### `algodrills.patterns`

Star, number and letter patterns. Each function takes a size `n` and returns
a list of lines. The functions do not print anything. The patterns are:

- Stars: `star_square`, `star_triangle`, `star_pyramid`,
  `inverted_star_pyramid`, `star_diamond`, `half_diamond`, `symmetric_void`,
  `butterfly`, `hollow_square`.
- Numbers: `number_triangle`, `repeated_number_triangle`,
  `inverted_number_triangle`, `binary_triangle`, `number_crown`,
  `increasing_number_triangle`, `concentric_numbers`.
- Letters: `letter_triangle`, `inverted_letter_triangle`, `letter_ramp`,
  `letter_hill`, `letter_tail_triangle`.

## Examples

```python
from algodrills.arrays import second_largest, missing_number
from algodrills.transform import union_sorted, left_rotate
from algodrills.maths import gcd, divisors, is_prime
from algodrills.recursion import fibonacci_series, is_palindrome
from algodrills.patterns import star_pyramid

second_largest([35, 76, 96, 45, 34])       # 76
missing_number([1, 2, 4, 5], 5)            # 3
union_sorted([1, 2, 3], [2, 3, 4, 5])      # [1, 2, 3, 4, 5]
left_rotate([1, 2, 3, 4, 5, 6, 7], 2)      # [3, 4, 5, 6, 7, 1, 2]
gcd(20, 15)                                # 5
divisors(12)                               # [1, 2, 3, 4, 6, 12]
is_prime(1483)                             # True
fibonacci_series(5)                        # [0, 1, 1, 2, 3, 5]
is_palindrome("A man, a plan, a canal: Panama")  # True

print("\n".join(star_pyramid(3)))
```

## Command line

`algodrills-reverse` prints an integer with its digits reversed. It takes the
integer as an argument, or reads it from standard input when no argument is
given:

```
$ echo 1234 | algodrills-reverse
4321
$ algodrills-reverse 1200
21
```

This is the only command. The rest of the package is used as a library.