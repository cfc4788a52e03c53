"""Number-theory helpers and classic integer puzzles."""

from __future__ import annotations

from math import log

MOD = 1_000_000_007

_ROMAN = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while b:
        a, b = b, a % b
    return a


def gcd_brute_force(a: int, b: int) -> int:
    """Greatest common divisor found by counting down from ``min(a, b)``.

    Raises ValueError unless both numbers are positive.
    """
    if a <= 0 or b <= 0:
        raise ValueError("gcd_brute_force() requires positive integers")
    return next(d for d in range(min(a, b), 0, -1) if a % d == 0 and b % d == 0)


def lcm(a: int, b: int) -> int:
    """Least common multiple; zero if either argument is zero."""
    divisor = gcd(abs(a), abs(b))
    if divisor == 0:
        return 0
    return abs(a * b) // divisor


def primes_up_to(limit: int) -> list[int]:
    """All primes not greater than ``limit``, by the sieve of Eratosthenes."""
    if limit < 2:
        return []
    sieve = bytearray([1]) * (limit + 1)
    sieve[0] = sieve[1] = 0
    i = 2
    while i * i <= limit:
        if sieve[i]:
            sieve[i * i :: i] = bytes(len(range(i * i, limit + 1, i)))
        i += 1
    return [n for n, is_prime in enumerate(sieve) if is_prime]


def nth_prime(k: int) -> int:
    """The ``k``-th prime, counting 2 as the first.

    Raises ValueError if ``k`` is less than 1.
    """
    if k < 1:
        raise ValueError("k must be at least 1")
    limit = 15 if k < 6 else int(k * (log(k) + log(log(k)))) + 1
    return primes_up_to(limit)[k - 1]


def fibonacci(n: int) -> int:
    """The ``n``-th Fibonacci number, with fib(0) = 0 and fib(1) = 1.

    Values of ``n`` below 2 are returned unchanged.
    """
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def fibonacci_series(count: int) -> list[int]:
    """The first ``count`` Fibonacci numbers, starting from 0."""
    series: list[int] = []
    a, b = 0, 1
    for _ in range(count):
        series.append(a)
        a, b = b, a + b
    return series


def factorial(n: int) -> int:
    """``n!`` for a non-negative ``n``."""
    if n < 0:
        raise ValueError("factorial() is not defined for negative numbers")
    result = 1
    for factor in range(2, n + 1):
        result *= factor
    return result


def power_of_two(n: int) -> int:
    """``2 ** n`` for a non-negative ``n``."""
    if n < 0:
        raise ValueError("power_of_two() requires a non-negative exponent")
    return 1 << n


def sum_to(n: int) -> int:
    """Sum of the integers from 1 to ``n``."""
    if n < 0:
        raise ValueError("sum_to() requires a non-negative bound")
    return sum(range(1, n + 1))


def digit_sum(n: int) -> int:
    """Sum of the decimal digits of ``n``; negative for a negative ``n``."""
    if n < 0:
        return -digit_sum(-n)
    total = 0
    while n:
        n, digit = divmod(n, 10)
        total += digit
    return total


def proper_divisors(n: int) -> list[int]:
    """Divisors of ``n`` that are smaller than ``n``, in increasing order."""
    return [d for d in range(1, n) if n % d == 0]


def is_armstrong(n: int) -> bool:
    """True if ``n`` equals the sum of its digits each raised to the digit count."""
    digits = [int(ch) for ch in str(n)] if n > 0 else []
    return sum(d ** len(digits) for d in digits) == n


def is_cubic_armstrong(n: int) -> bool:
    """True if ``n`` equals the sum of the cubes of its digits."""
    digits = [int(ch) for ch in str(n)] if n > 0 else []
    return sum(d**3 for d in digits) == n


def count_digits(n: int) -> int:
    """Number of decimal digits of a positive ``n``; zero for ``n <= 0``."""
    count = 0
    while n > 0:
        count += 1
        n //= 10
    return count


def binary_digits(n: int) -> int:
    """The integer whose decimal digits spell ``n`` in binary (e.g. 5 -> 101)."""
    if n < 0:
        return -binary_digits(-n)
    return int(format(n, "b"))


def reverse_number(n: int) -> int:
    """``n`` with its decimal digits reversed, keeping the sign."""
    if n < 0:
        return -reverse_number(-n)
    return int(str(n)[::-1])


def is_palindrome_number(n: int) -> bool:
    """True if ``n`` reads the same with its digits reversed."""
    return reverse_number(n) == n


def to_roman(n: int) -> str:
    """Roman numeral for ``n``; empty for ``n <= 0``. Thousands repeat ``M``."""
    parts: list[str] = []
    for value, symbol in _ROMAN:
        if n <= 0:
            break
        count, n = divmod(n, value)
        parts.append(symbol * count)
    return "".join(parts)


def next_greater_number(digits: str) -> str:
    """Smallest arrangement of ``digits`` that is greater than ``digits``.

    Raises ValueError when the digits are already in non-increasing order.
    """
    chars = list(digits)
    pivot = next(
        (i for i in range(len(chars) - 1, 0, -1) if chars[i] > chars[i - 1]), 0
    )
    if pivot == 0:
        raise ValueError("Next number is not possible")
    smallest = min(
        (j for j in range(pivot, len(chars)) if chars[j] > chars[pivot - 1]),
        key=chars.__getitem__,
    )
    chars[smallest], chars[pivot - 1] = chars[pivot - 1], chars[smallest]
    chars[pivot:] = sorted(chars[pivot:])
    return "".join(chars)


def mod_pow(base: int, exp: int) -> int:
    """``base ** exp`` modulo 1_000_000_007, by repeated squaring."""
    base %= MOD
    result = 1
    while exp > 0:
        if exp & 1:
            result = result * base % MOD
        base = base * base % MOD
        exp >>= 1
    return result


def dice_combinations(n: int) -> int:
    """Ways to reach sum ``n`` with throws of a six-sided die, modulo 1_000_000_007."""
    if n < 0:
        return 0
    ways = [1]
    for total in range(1, n + 1):
        ways.append(sum(ways[max(0, total - 6) : total]) % MOD)
    return ways[n]