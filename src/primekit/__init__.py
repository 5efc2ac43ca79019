"""primekit - prime enumeration, primality testing and factorization."""

__version__ = "0.1.0"

from primekit.core.generators import (
    EratosthenesGenerator,
    TrialDivisionGenerator,
    Generator23,
    enumerate_primes,
)
from primekit.core.primality import is_probable_prime
from primekit.core.factorization import factorize
from primekit.core.random_primes import random_prime_of_bit_length, random_primes_in_range

__all__ = [
    "EratosthenesGenerator",
    "TrialDivisionGenerator",
    "Generator23",
    "enumerate_primes",
    "is_probable_prime",
    "factorize",
    "random_prime_of_bit_length",
    "random_primes_in_range",
]
