"""NumPy-facing prime utilities built on the pseudo-prime generators.

These mirror the usual sieve helpers: arrays of primes up to a limit or in
a range, the n-th prime, prime counts, and a deterministic single-number
check.
"""

from __future__ import annotations

import numpy as np

from primekit.core.generators import EratosthenesGenerator, Generator23, enumerate_primes
from primekit.core.tables import EratosthenesSieve


def generate_primes(limit: int) -> np.ndarray:
    """Generate all prime numbers up to and including limit.

    Args:
        limit: Upper bound for prime generation (inclusive).

    Returns:
        Array of prime numbers up to limit.

    Raises:
        ValueError: If limit is less than 2.
    """
    if limit < 2:
        raise ValueError(f"Limit must be >= 2, got {limit}")

    return np.fromiter(enumerate_primes(limit, EratosthenesGenerator()), dtype=np.int64)


def generate_primes_range(start: int, stop: int) -> np.ndarray:
    """Generate prime numbers in range [start, stop].

    Args:
        start: Lower bound (inclusive).
        stop: Upper bound (inclusive).

    Returns:
        Array of primes in the specified range.
    """
    if start > stop:
        raise ValueError(f"start ({start}) must be <= stop ({stop})")

    if stop < 2:
        return np.array([], dtype=np.int64)

    all_primes = generate_primes(stop)
    return all_primes[all_primes >= start]


def nth_prime(n: int) -> int:
    """Return the nth prime number (1-indexed).

    Args:
        n: Which prime to return (1 = first prime = 2).

    Returns:
        The nth prime number.
    """
    if n < 1:
        raise ValueError(f"n must be >= 1, got {n}")

    return EratosthenesSieve().get_nth_prime(n - 1)


def count_primes(limit: int) -> int:
    """Count prime numbers up to limit."""
    if limit < 2:
        return 0

    return sum(1 for _ in enumerate_primes(limit, EratosthenesGenerator()))


def is_prime(n: int) -> bool:
    """Check if a single number is prime by trial division.

    Divides by 2, 3 and the integers 6k +/- 1 up to the square root.

    Args:
        n: Number to check.

    Returns:
        True if n is prime, False otherwise.
    """
    if n < 2:
        return False

    for p in Generator23():
        if p * p > n:
            return True
        if n % p == 0:
            return False
