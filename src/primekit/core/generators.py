"""Pseudo-prime generators.

A pseudo-prime generator enumerates, in strictly ascending order, a sequence
that contains every prime and possibly some composites. It remembers its
position and an optional upper bound, and doubles as a Python iterator that
stops once a value exceeds the bound.

Three strategies are provided:

- ``EratosthenesGenerator``: segmented sieve of Eratosthenes, exact primes.
- ``TrialDivisionGenerator``: table built by trial division, exact primes.
- ``Generator23``: every integer not divisible by 2 or 3. Very cheap and
  table-free, which suits factorizing small numbers with many factors.
"""

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod
from typing import Any, Callable, Iterator, List, Optional

from primekit.core.tables import (
    DEFAULT_MAX_SEGMENT_SIZE,
    EratosthenesSieve,
    TrialDivisionTable,
)


class PseudoPrimeGenerator(ABC):
    """Base class for enumerating pseudo-prime numbers.

    Subclasses implement ``succ`` and ``rewind``. ``succ`` must return
    strictly increasing values and must eventually return every prime;
    ``factorize`` depends on both properties.

    Args:
        upper_bound: Optional inclusive cap on emitted values.
    """

    def __init__(self, upper_bound: Optional[int] = None):
        self._upper_bound = upper_bound
        # Value read past the bound, returned first once the bound allows it.
        self._held: Optional[int] = None

    @property
    def upper_bound(self) -> Optional[int]:
        """Inclusive cap on iterated values, or None.

        Iteration holds back the first value above the cap, so raising the
        cap later resumes exactly where iteration stopped. ``succ`` ignores
        the cap and the held value, so do not mix it with bounded iteration
        without a ``rewind`` in between.
        """
        return self._upper_bound

    @upper_bound.setter
    def upper_bound(self, value: Optional[int]) -> None:
        self._upper_bound = value

    @abstractmethod
    def succ(self) -> int:
        """Return the next pseudo-prime and move the position forward."""

    @abstractmethod
    def rewind(self) -> "PseudoPrimeGenerator":
        """Reset the position to the start of the sequence."""

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        if self._held is not None:
            value, self._held = self._held, None
        else:
            value = self.succ()
        if self._upper_bound is not None and value > self._upper_bound:
            self._held = value
            raise StopIteration
        return value

    def each(self, fn: Callable[[int], Any]) -> Any:
        """Call ``fn`` with every value up to the bound.

        Returns:
            The result of the last call, or None if nothing was emitted.
        """
        result = None
        for value in self:
            result = fn(value)
        return result

    def __repr__(self) -> str:
        return f"{type(self).__name__}(upper_bound={self._upper_bound!r})"


class EratosthenesGenerator(PseudoPrimeGenerator):
    """Generator backed by an ``EratosthenesSieve``.

    Args:
        upper_bound: Optional inclusive cap on emitted values.
        sieve: Optional sieve shared with other generators. When given it is
            kept across ``rewind``; otherwise the generator owns a fresh one.
        max_segment_size: Segment bound for an owned sieve.
    """

    def __init__(
        self,
        upper_bound: Optional[int] = None,
        sieve: Optional[EratosthenesSieve] = None,
        max_segment_size: int = DEFAULT_MAX_SEGMENT_SIZE,
    ):
        super().__init__(upper_bound)
        self._owns_sieve = sieve is None
        self._max_segment_size = max_segment_size
        self.sieve = sieve if sieve is not None else EratosthenesSieve(max_segment_size)
        self._last_prime_index = -1

    def succ(self) -> int:
        self._last_prime_index += 1
        return self.sieve.get_nth_prime(self._last_prime_index)

    def rewind(self) -> "EratosthenesGenerator":
        self._held = None
        self._last_prime_index = -1
        if self._owns_sieve:
            self.sieve = EratosthenesSieve(self._max_segment_size)
        return self


class TrialDivisionGenerator(PseudoPrimeGenerator):
    """Generator backed by a ``TrialDivisionTable``.

    Args:
        upper_bound: Optional inclusive cap on emitted values.
        table: Optional table shared with other generators, kept across
            ``rewind``.
    """

    def __init__(
        self,
        upper_bound: Optional[int] = None,
        table: Optional[TrialDivisionTable] = None,
    ):
        super().__init__(upper_bound)
        self._owns_table = table is None
        self.table = table if table is not None else TrialDivisionTable()
        self._index = -1

    def succ(self) -> int:
        self._index += 1
        return self.table[self._index]

    def rewind(self) -> "TrialDivisionGenerator":
        self._held = None
        self._index = -1
        if self._owns_table:
            self.table = TrialDivisionTable()
        return self


class Generator23(PseudoPrimeGenerator):
    """Generates 2, 3 and then every integer > 3 not divisible by 2 or 3.

    The sequence is 2, 3, 5, 7, 11, 13, 17, 19, 23, 25, ... and contains
    composites such as 25, 35 and 49.
    """

    def __init__(self, upper_bound: Optional[int] = None):
        super().__init__(upper_bound)
        self._prime = 1
        self._step: Optional[int] = None

    def succ(self) -> int:
        if self._step is not None:
            self._prime += self._step
            self._step = 6 - self._step
        elif self._prime == 1:
            self._prime = 2
        elif self._prime == 2:
            self._prime = 3
        else:
            self._prime = 5
            self._step = 2
        return self._prime

    def rewind(self) -> "Generator23":
        self._held = None
        self._prime = 1
        self._step = None
        return self


Modulo6Generator = Generator23


GENERATORS = {
    "eratosthenes": EratosthenesGenerator,
    "sieve": EratosthenesGenerator,
    "trial_division": TrialDivisionGenerator,
    "generator23": Generator23,
    "mod6": Generator23,
}


def create_generator(name: str = "eratosthenes", **kwargs) -> PseudoPrimeGenerator:
    """Factory function to create generators.

    Args:
        name: One of the keys of ``GENERATORS``.
        **kwargs: Arguments passed to the generator constructor.

    Returns:
        A freshly constructed generator.
    """
    if name not in GENERATORS:
        raise ValueError(f"Unknown generator: {name}. Choose from {list(GENERATORS.keys())}")

    return GENERATORS[name](**kwargs)


def enumerate_primes(
    upper_bound: Optional[int] = None,
    generator: Optional[PseudoPrimeGenerator] = None,
) -> Iterator[int]:
    """Iterate over the primes up to ``upper_bound``.

    The sequence is infinite when ``upper_bound`` is None. Each call with the
    default generator starts over from 2.

    Args:
        upper_bound: Inclusive upper bound, or None for no bound.
        generator: Generator to drive. Defaults to a new
            ``EratosthenesGenerator``. Its bound is overwritten.

    Returns:
        Iterator over the generator's values.
    """
    if generator is None:
        generator = EratosthenesGenerator()
    generator.upper_bound = upper_bound
    return iter(generator)


def first_primes(n: int, generator: Optional[PseudoPrimeGenerator] = None) -> List[int]:
    """Return the first ``n`` values of ``generator`` (primes by default)."""
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    return list(itertools.islice(enumerate_primes(None, generator), n))
