import pytest

from numbertoolkit.arith import (
    divisor_sum,
    factorial,
    fibonacci_series,
    is_armstrong,
    is_friendly_pair,
    is_leap_year,
    is_palindrome_number,
    is_prime,
    is_prime_fast,
    power,
    primes_in_range,
    reverse_digits,
    to_binary,
)


@pytest.mark.parametrize("n", [153, 370, 371, 407])
def test_armstrong_numbers(n):
    assert is_armstrong(n) is True


@pytest.mark.parametrize("n", [10, 154, 999, -153])
def test_not_armstrong_numbers(n):
    assert is_armstrong(n) is False


@pytest.mark.parametrize("base", [-3, 2, 7])
def test_power_recurrence(base):
    assert power(base, 0) == 1
    for e in range(10):
        assert power(base, e + 1) == power(base, e) * base


def test_power_negative_exponent():
    assert power(5, -3) == 1


def test_binary_round_trip():
    for n in range(1, 500):
        digits = to_binary(n)
        assert set(digits) <= {"0", "1"}
        assert digits[0] == "1"
        assert int(digits, 2) == n


def test_binary_non_positive():
    assert to_binary(0) == ""
    assert to_binary(-4) == ""


def test_fibonacci_always_has_first_two_terms():
    assert fibonacci_series(0) == [0, 1]
    assert fibonacci_series(1) == [0, 1]


def test_fibonacci_recurrence():
    terms = fibonacci_series(30)
    assert len(terms) == 30
    assert terms[:2] == [0, 1]
    for a, b, c in zip(terms, terms[1:], terms[2:]):
        assert c == a + b


def test_divisor_sum_perfect_numbers():
    assert divisor_sum(6) == 6
    assert divisor_sum(28) == 28


def test_divisor_sum_of_prime():
    for p in (2, 3, 5, 7, 11, 13):
        assert divisor_sum(p) == 1


def test_friendly_pair():
    assert is_friendly_pair(6, 28) is True
    assert is_friendly_pair(12, 12) is True


def test_friendly_pair_zero():
    with pytest.raises(ZeroDivisionError):
        is_friendly_pair(6, 0)


def test_prime_tests_agree():
    for n in range(0, 300):
        assert is_prime_fast(n) == is_prime(n)


@pytest.mark.parametrize("n", [2, 3, 5, 7, 97, 7919])
def test_primes(n):
    assert is_prime_fast(n) is True
    assert is_prime(n) is True


@pytest.mark.parametrize("n", [0, 1, 4, 25, 49, 121, 169])
def test_non_primes(n):
    assert is_prime_fast(n) is False
    assert is_prime(n) is False


def test_reverse_digits_round_trip():
    for n in range(1, 2000):
        if n % 10:
            assert reverse_digits(reverse_digits(n)) == n


def test_reverse_digits_non_positive():
    assert reverse_digits(0) == 0
    assert reverse_digits(-5) == 0


def test_palindrome_numbers():
    assert is_palindrome_number(12321) is True
    assert is_palindrome_number(7) is True
    assert is_palindrome_number(123) is False
    assert is_palindrome_number(-121) is False


def test_factorial():
    assert factorial(0) == 1
    assert factorial(5) == 120
    for n in range(1, 20):
        assert factorial(n) == n * factorial(n - 1)


@pytest.mark.parametrize(
    "year, expected",
    [(2000, True), (1900, False), (2024, True), (2023, False), (2100, False)],
)
def test_leap_year(year, expected):
    assert is_leap_year(year) is expected


def test_primes_in_range_matches_prime_test():
    found = primes_in_range(10, 100)
    assert found == [p for p in range(10, 101) if is_prime(p)]


def test_primes_in_range_odd_candidates_only():
    found = primes_in_range(1, 10)
    assert found == [1, 3, 5, 7]
    assert 2 not in primes_in_range(2, 20)
    assert all(p % 2 for p in primes_in_range(2, 200))


def test_primes_in_range_too_small():
    with pytest.raises(ValueError, match="There are no primes upto 1"):
        primes_in_range(0, 1)