"""Prime factorization by division over a pseudo-prime generator."""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from primekit.core.generators import Generator23, PseudoPrimeGenerator

Factorization = List[Tuple[int, int]]


def factorize(value: int, generator: Optional[PseudoPrimeGenerator] = None) -> Factorization:
    """Return the prime factorization of ``value``.

    For ``value = p_1**e_1 * ... * p_n**e_n`` the result is
    ``[(p_1, e_1), ..., (p_n, e_n)]`` with the primes ascending. A negative
    value gets a leading ``(-1, 1)`` pair, and 1 factors to ``[]``.

    Args:
        value: Integer to factor.
        generator: Pseudo-prime generator positioned at its start. Must be
            strictly increasing and emit every prime. Defaults to a new
            ``Generator23``.

    Returns:
        List of (prime, exponent) pairs.

    Raises:
        ZeroDivisionError: If value is 0.

    Example:
        >>> factorize(45)
        [(3, 2), (5, 1)]
    """
    if not isinstance(value, int):
        raise TypeError(f"value must be an integer, got {type(value).__name__}")
    if value == 0:
        raise ZeroDivisionError("cannot factorize 0")

    if generator is None:
        generator = Generator23()

    factors: Factorization = []

    if value < 0:
        value = -value
        factors.append((-1, 1))

    for prime in generator:
        count = 0
        while True:
            quotient, remainder = divmod(value, prime)
            if remainder:
                break
            value = quotient
            count += 1

        if count:
            factors.append((prime, count))

        # Whatever remains has no factor <= prime, so it is 1 or a prime.
        if quotient <= prime:
            break

    if value > 1:
        factors.append((value, 1))

    return factors


def int_from_factorization(factors: Iterable[Tuple[int, int]]) -> int:
    """Re-compose a factorization into the integer it describes.

    Example:
        >>> int_from_factorization([(3, 2), (5, 1)])
        45
    """
    value = 1
    for prime, exponent in factors:
        value *= prime ** exponent
    return value
