"""Small number-theory helpers."""

from __future__ import annotations

INT_MAX = 2**31 - 1


def is_armstrong(num: int) -> bool:
    """Return True if ``num`` equals the sum of the cubes of its digits."""
    sign = -1 if num < 0 else 1
    cubes = sum(int(digit) ** 3 for digit in str(abs(num)))
    return sign * cubes == num


def fibonacci(n: int) -> list[int]:
    """Return the first ``n`` terms of the Fibonacci series, starting at 0."""
    terms = []
    first, second = 0, 1
    for _ in range(max(n, 0)):
        terms.append(first)
        first, second = second, first + second
    return terms


def is_leap_year(year: int) -> bool:
    """Return True for Gregorian leap years."""
    if year % 400 == 0:
        return True
    if year % 100 == 0:
        return False
    return year % 4 == 0


def is_prime(n: int) -> bool:
    """Trial-division primality test.

    0 and 1 are not prime; no divisor is searched for values below 4.
    """
    if n in (0, 1):
        return False
    return not any(n % i == 0 for i in range(2, n // 2 + 1))


def total_digits(x: int) -> int:
    """Number of decimal digits in a positive integer; 0 for x <= 0."""
    return len(str(x)) if x > 0 else 0


def reverse_int(x: int) -> int:
    """Reverse the digits of ``x``, returning 0 if the result leaves 32 bits."""
    if abs(x) > INT_MAX:
        return 0
    magnitude = abs(x)
    reversed_value = int(str(magnitude)[::-1]) if magnitude else 0
    if reversed_value > INT_MAX:
        return 0
    return -reversed_value if x < 0 else reversed_value


def reverse_number(number: int) -> int:
    """Reverse the digits of a positive integer; non-positive values give 0."""
    if number <= 0:
        return 0
    return int(str(number)[::-1])