"""Small number-theory and arithmetic helpers."""

from __future__ import annotations

import math
from itertools import count, takewhile


def is_armstrong(n: int) -> bool:
    """True if the sum of the cubes of the digits of ``n`` equals ``n``."""
    total = sum(int(d) ** 3 for d in str(n)) if n > 0 else 0
    return total == n


def power(base: int, exponent: int) -> int:
    """``base`` multiplied by itself ``exponent`` times; 1 when exponent <= 0."""
    return math.prod([base] * max(exponent, 0))


def to_binary(n: int) -> str:
    """Binary digits of a positive integer; empty for zero or negatives."""
    return format(n, "b") if n > 0 else ""


def fibonacci_series(n: int) -> list[int]:
    """The first ``n`` Fibonacci terms; the first two are always present."""
    terms = [0, 1]
    while len(terms) < n:
        terms.append(terms[-1] + terms[-2])
    return terms


def divisor_sum(num: int) -> int:
    """Sum of the proper divisors of ``num``."""
    return sum(i for i in range(1, num) if num % i == 0)


def is_friendly_pair(a: int, b: int) -> bool:
    """True if the whole-number ratios of divisor sum to number agree."""
    return divisor_sum(a) // a == divisor_sum(b) // b


def is_prime_fast(n: int) -> bool:
    """Primality test by trial division over numbers of the form 6k +/- 1."""
    if n <= 1:
        return False
    if n in (2, 3):
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    candidates = takewhile(lambda i: i * i <= n, count(5, 6))
    return all(n % i and n % (i + 2) for i in candidates)


def _no_divisor_up_to_half(n: int) -> bool:
    return all(n % j for j in range(2, n // 2 + 1))


def is_prime(n: int) -> bool:
    """Primality test by trial division up to ``n // 2``; 0 and 1 are not prime."""
    if n in (0, 1):
        return False
    return _no_divisor_up_to_half(n)


def reverse_digits(n: int) -> int:
    """Digits of a positive integer in reverse order; 0 for non-positive input."""
    return int(str(n)[::-1]) if n > 0 else 0


def is_palindrome_number(n: int) -> bool:
    """True if ``n`` reads the same with its digits reversed."""
    return reverse_digits(n) == n


def factorial(n: int) -> int:
    """Product of 1..n; 1 when ``n`` is below 1."""
    return math.prod(range(1, n + 1))


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def primes_in_range(low: int, high: int) -> list[int]:
    """Odd numbers from ``low`` to ``high`` with no divisor up to their half.

    Only odd candidates are examined, starting at ``low`` (or the next odd
    number when ``low`` is even). Raises ValueError when ``high`` is below 2.
    """
    if high < 2:
        raise ValueError(f"There are no primes upto {high}")
    start = low + 1 if low % 2 == 0 else low
    return [i for i in range(start, high + 1, 2) if _no_divisor_up_to_half(i)]