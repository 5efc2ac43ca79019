"""Core prime generation, primality testing and factorization."""

from primekit.core.generators import (
    PseudoPrimeGenerator,
    EratosthenesGenerator,
    TrialDivisionGenerator,
    Generator23,
    Modulo6Generator,
    create_generator,
    enumerate_primes,
    first_primes,
)
from primekit.core.primality import is_probable_prime
from primekit.core.factorization import factorize, int_from_factorization
from primekit.core.random_primes import random_prime_of_bit_length, random_primes_in_range
from primekit.core.sieve import generate_primes, is_prime, nth_prime

__all__ = [
    "PseudoPrimeGenerator",
    "EratosthenesGenerator",
    "TrialDivisionGenerator",
    "Generator23",
    "Modulo6Generator",
    "create_generator",
    "enumerate_primes",
    "first_primes",
    "is_probable_prime",
    "factorize",
    "int_from_factorization",
    "random_prime_of_bit_length",
    "random_primes_in_range",
    "generate_primes",
    "is_prime",
    "nth_prime",
]
