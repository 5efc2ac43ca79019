"""Miller-Rabin probabilistic primality test."""

from __future__ import annotations

import random
from typing import Optional

DEFAULT_ROUNDS = 10

_system_random = random.SystemRandom()


def is_probable_prime(n: int, rounds: int = DEFAULT_ROUNDS, rng: Optional[random.Random] = None) -> bool:
    """Miller-Rabin primality test.

    Composites pass a single round with probability at most 1/4, so a
    ``True`` result is wrong with probability at most ``4 ** -rounds``.
    A ``False`` result is always correct.

    Args:
        n: Number to test.
        rounds: Number of random witnesses to try.
        rng: Source of witnesses. Defaults to ``random.SystemRandom``.

    Returns:
        True if probably prime, False if definitely composite.
    """
    if not isinstance(n, int):
        raise TypeError(f"n must be an integer, got {type(n).__name__}")
    if rounds < 1:
        raise ValueError(f"rounds must be >= 1, got {rounds}")

    if n < 2:
        return False
    if n < 4:
        return True
    if n % 2 == 0:
        return False

    if rng is None:
        rng = _system_random

    n_minus_one = n - 1

    # n - 1 = d * 2^s with d odd
    d = n_minus_one
    s = 0
    while d % 2 == 0:
        d >>= 1
        s += 1

    for _ in range(rounds):
        witness = rng.randint(2, n - 2)
        y = pow(witness, d, n)
        if y == 1 or y == n_minus_one:
            continue
        for _ in range(s - 1):
            y = pow(y, 2, n)
            if y == 1:
                return False
            if y == n_minus_one:
                break
        if y != n_minus_one:
            return False

    return True
