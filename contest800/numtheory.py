"""Number-theory helpers: gcd, modular arithmetic, primes and Euler's totient."""

from __future__ import annotations

import random
from collections.abc import Sequence

MOD = 1_000_000_007
MOD1 = 998_244_353

_rng = random.Random()


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of two non-negative integers."""
    if b > a:
        a, b = b, a
    while b != 0:
        a, b = b, a % b
    return a


def expo(a: int, b: int, mod: int) -> int:
    """Compute ``a ** b`` modulo ``mod`` by repeated squaring."""
    result = 1
    while b > 0:
        if b & 1:
            result = (result * a) % mod
        a = (a * a) % mod
        b >>= 1
    return result


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(x, y, g)`` with ``a * x + b * y == g == gcd(a, b)``."""
    if b == 0:
        return 1, 0, a
    x, y, g = extended_gcd(b, a % b)
    return y, x - y * (a // b), g


def mminv(a: int, b: int) -> int:
    """Modular inverse of ``a`` modulo ``b``; ``b`` need not be prime.

    The result is the Bezout coefficient and may be negative.
    """
    x, _, _ = extended_gcd(a, b)
    return x


def mminvprime(a: int, b: int) -> int:
    """Modular inverse of ``a`` modulo the prime ``b``."""
    return expo(a, b - 2, b)


def combination(
    n: int, r: int, m: int, fact: Sequence[int], ifact: Sequence[int]
) -> int:
    """Binomial coefficient ``C(n, r)`` modulo ``m`` from precomputed factorials."""
    return (fact[n] * ifact[n - r]) % m * ifact[r] % m


def sieve(n: int) -> list[int]:
    """All primes up to and including ``n``, in increasing order."""
    if n < 2:
        return []
    composite = bytearray(n + 1)
    primes = []
    for i in range(2, n + 1):
        if not composite[i]:
            primes.append(i)
            composite[2 * i :: i] = b"\x01" * len(range(2 * i, n + 1, i))
    return primes


def mod_add(a: int, b: int, m: int) -> int:
    """``(a + b) mod m`` in ``[0, m)``."""
    return (a % m + b % m) % m


def mod_mul(a: int, b: int, m: int) -> int:
    """``(a * b) mod m`` in ``[0, m)``."""
    return (a % m) * (b % m) % m


def mod_sub(a: int, b: int, m: int) -> int:
    """``(a - b) mod m`` in ``[0, m)``."""
    return (a % m - b % m) % m


def mod_div(a: int, b: int, m: int) -> int:
    """``a / b`` modulo the prime ``m``."""
    return mod_mul(a % m, mminvprime(b % m, m), m)


def phin(n: int) -> int:
    """Euler's totient of a positive integer, in O(sqrt(n))."""
    if n < 1:
        raise ValueError("phin is defined for positive integers only")
    number = n
    if n % 2 == 0:
        number //= 2
        while n % 2 == 0:
            n //= 2
    i = 3
    while i * i <= n:
        if n % i == 0:
            while n % i == 0:
                n //= i
            number = number // i * (i - 1)
        i += 2
    if n > 1:
        number = number // n * (n - 1)
    return number


def random_number(low: int, high: int) -> int:
    """A uniformly random integer in the closed range ``[low, high]``."""
    if low > high:
        raise ValueError("low must not exceed high")
    return _rng.randint(low, high)