"""Incrementally grown prime tables backing the sieve generators.

Both tables start from the same seed list of the primes up to 101 and only
ever grow. They hold no cursor of their own, so one table may back several
generators as long as the caller serializes access to it.
"""

from __future__ import annotations

import logging
import math
from typing import List

import numpy as np

logger = logging.getLogger(__name__)

SEED_PRIMES = (
    2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47,
    53, 59, 61, 67, 71, 73, 79, 83, 89, 97, 101,
)

DEFAULT_MAX_SEGMENT_SIZE = 1_000_000


class TrialDivisionTable:
    """Prime table extended by trial division.

    Candidates are restricted to 1 and 5 mod 6, and each one is divided only
    by the known primes not exceeding its square root. The square root is
    never computed: the table tracks the square of the next divisor instead.
    """

    def __init__(self):
        self.primes: List[int] = list(SEED_PRIMES)
        # No prime lies between primes[-1] and next_to_check.
        # next_to_check % 6 == 1.
        self.next_to_check = 103
        # primes[ulticheck_index] is the largest divisor needed so far.
        self.ulticheck_index = 3
        self.ulticheck_next_squared = 121

    def __len__(self) -> int:
        return len(self.primes)

    def __getitem__(self, index: int) -> int:
        """Return the index-th prime (0-based), extending the table on demand."""
        if index < 0:
            raise IndexError(f"index must be >= 0, got {index}")
        self.ensure_populated_through(index)
        return self.primes[index]

    def ensure_populated_through(self, index: int) -> None:
        primes = self.primes
        while index >= len(primes):
            while self.next_to_check + 4 > self.ulticheck_next_squared:
                self.ulticheck_index += 1
                self.ulticheck_next_squared = primes[self.ulticheck_index + 1] ** 2

            # 2 and 3 never divide a candidate, so division starts at primes[2].
            divisors = primes[2:self.ulticheck_index + 1]

            candidate = self.next_to_check
            if all(candidate % p for p in divisors):
                primes.append(candidate)
            candidate += 4
            if all(candidate % p for p in divisors):
                primes.append(candidate)
            self.next_to_check = candidate + 2


class EratosthenesSieve:
    """Prime table extended one segment at a time by a sieve of Eratosthenes.

    Each segment covers the odd integers in ``(segment_min, segment_max]``
    and is held as a numpy boolean array with one slot per odd number.

    Args:
        max_segment_size: Largest span of integers sieved per extension.
            Must be a positive even number.
    """

    def __init__(self, max_segment_size: int = DEFAULT_MAX_SEGMENT_SIZE):
        if max_segment_size < 2 or max_segment_size % 2:
            raise ValueError(
                f"max_segment_size must be a positive even number, got {max_segment_size}"
            )
        self.max_segment_size = max_segment_size
        self.primes: List[int] = list(SEED_PRIMES)
        # Every prime <= max_checked is in the table; max_checked is even.
        self.max_checked = self.primes[-1] + 1

    def __len__(self) -> int:
        return len(self.primes)

    def get_nth_prime(self, n: int) -> int:
        """Return the n-th prime (0-based)."""
        if n < 0:
            raise IndexError(f"n must be >= 0, got {n}")
        while len(self.primes) <= n:
            self.compute_primes()
        return self.primes[n]

    def compute_primes(self) -> None:
        """Sieve the next segment and append its primes to the table."""
        max_cached_prime = self.primes[-1]

        # Keeps a partially applied extension from double counting primes.
        if max_cached_prime > self.max_checked:
            self.max_checked = max_cached_prime + 1

        segment_min = self.max_checked
        # Known primes can only vet numbers up to twice the largest of them.
        segment_max = min(segment_min + self.max_segment_size, max_cached_prime * 2)
        root = math.isqrt(segment_max)

        # Slot i holds segment_min + 1 + 2*i.
        segment = np.ones((segment_max - segment_min) // 2, dtype=bool)

        primes = self.primes
        sieving = 1
        while primes[sieving] <= root:
            prime = primes[sieving]
            first = (-(segment_min + 1 + prime) // 2) % prime
            segment[first::prime] = False
            sieving += 1

        offsets = np.flatnonzero(segment).tolist()
        self.primes.extend(segment_min + 1 + 2 * i for i in offsets)
        self.max_checked = segment_max

        logger.debug(
            "Sieved segment (%d, %d]: %d primes cached, largest %d",
            segment_min, segment_max, len(self.primes), self.primes[-1],
        )
