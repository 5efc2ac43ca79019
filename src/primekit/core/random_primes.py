"""Random prime generation."""

from __future__ import annotations

import logging
import random
from typing import List, Optional

from primekit.core.generators import EratosthenesGenerator, PseudoPrimeGenerator, enumerate_primes
from primekit.core.primality import DEFAULT_ROUNDS, is_probable_prime

logger = logging.getLogger(__name__)

_system_random = random.SystemRandom()


def random_odd_int(bits: int, rng: Optional[random.Random] = None) -> int:
    """Return a random odd integer of exactly ``bits`` bits."""
    if bits < 2:
        raise ValueError(f"bits must be >= 2, got {bits}")
    if rng is None:
        rng = _system_random
    return rng.getrandbits(bits) | (1 << (bits - 1)) | 1


def random_prime_of_bit_length(
    bits: int,
    rounds: int = DEFAULT_ROUNDS,
    rng: Optional[random.Random] = None,
) -> int:
    """Return a random probable prime of exactly ``bits`` bits.

    Draws odd candidates until one passes Miller-Rabin. There is no retry
    limit; about ``ln(2**bits) / 2`` candidates are needed on average.

    Args:
        bits: Bit length of the prime, at least 2.
        rounds: Miller-Rabin rounds per candidate.
        rng: Source of candidates and witnesses.

    Returns:
        An odd probable prime ``p`` with ``p.bit_length() == bits``.
    """
    if bits < 2:
        raise ValueError(f"bits must be >= 2, got {bits}")
    if rng is None:
        rng = _system_random

    attempts = 0
    while True:
        attempts += 1
        candidate = random_odd_int(bits, rng)
        if is_probable_prime(candidate, rounds, rng):
            logger.debug("Found %d-bit prime after %d candidates", bits, attempts)
            return candidate


def random_primes_in_range(
    start: int,
    stop: int,
    count: int,
    generator: Optional[PseudoPrimeGenerator] = None,
    rng: Optional[random.Random] = None,
) -> List[int]:
    """Return ``count`` distinct values of ``generator`` drawn from [start, stop].

    Values are sampled without replacement. If the range holds fewer than
    ``count`` candidates, all of them are returned in random order.

    Args:
        start: Lower bound (inclusive).
        stop: Upper bound (inclusive).
        count: Number of values wanted.
        generator: Source of candidates, consumed from its current position.
            Defaults to a new ``EratosthenesGenerator``, so that every value
            is prime. Pseudo-prime generators may contribute composites.
        rng: Source of randomness for the draw.

    Returns:
        List of at most ``count`` values.
    """
    if start > stop:
        raise ValueError(f"start ({start}) must be <= stop ({stop})")
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    if generator is None:
        generator = EratosthenesGenerator()
    if rng is None:
        rng = _system_random

    values = [p for p in enumerate_primes(stop, generator) if p >= start]

    if len(values) < count:
        logger.warning(
            "Only %d candidates in [%d, %d], fewer than the %d requested",
            len(values), start, stop, count,
        )
        count = len(values)

    return rng.sample(values, count)
