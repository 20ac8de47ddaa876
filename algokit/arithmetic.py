"""Number-theoretic helpers: greatest common divisor and Goldbach-style prime pairs."""

from __future__ import annotations


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's repeated remainders."""
    if b == 0:
        raise ValueError("the second number must be non-zero")
    while a % b != 0:
        a, b = b, a % b
    return abs(b)


def _sieve(limit: int) -> list[bool]:
    is_prime = [True] * limit
    for index in range(min(limit, 2)):
        is_prime[index] = False
    candidate = 2
    while candidate * candidate < limit:
        if is_prime[candidate]:
            for multiple in range(candidate * candidate, limit, candidate):
                is_prime[multiple] = False
        candidate += 1
    return is_prime


def prime_sum_pair(n: int) -> tuple[int, int] | None:
    """Two primes adding up to ``n`` with the smaller first, or None if there are none."""
    if n < 4:
        return None
    is_prime = _sieve(n)
    for low in range(2, n):
        if is_prime[low] and is_prime[n - low]:
            return low, n - low
    return None