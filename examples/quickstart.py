"""Quick start example for primekit.

Run this script to exercise each part of the library and test the installation.
"""

import time


def main():
    print("primekit - Quick Start Demo")
    print("=" * 50)

    print("\n1. Enumerating primes below 100 with each generator...")
    from primekit.core.generators import (
        EratosthenesGenerator,
        TrialDivisionGenerator,
        Generator23,
        enumerate_primes,
    )

    for gen in (EratosthenesGenerator(), TrialDivisionGenerator(), Generator23()):
        values = list(enumerate_primes(100, gen))
        print(f"   {type(gen).__name__}: {len(values)} values, last={values[-1]}")

    print("\n2. Testing sieve throughput...")
    from primekit.core.sieve import generate_primes

    start = time.perf_counter()
    primes = generate_primes(2_000_000)
    elapsed = time.perf_counter() - start

    print(f"   Generated {len(primes):,} primes up to 2M in {elapsed:.3f}s")
    print(f"   First 10: {primes[:10].tolist()}")
    print(f"   Last 10: {primes[-10:].tolist()}")

    print("\n3. Miller-Rabin on Mersenne numbers 2^p - 1...")
    from primekit.core.primality import is_probable_prime

    for p in (31, 61, 67, 89, 107, 127):
        verdict = "prime" if is_probable_prime(2**p - 1, rounds=20) else "composite"
        print(f"   2^{p} - 1: {verdict}")

    print("\n4. Factorizing...")
    from primekit.core.factorization import factorize
    from primekit.cli import format_factorization

    for value in (360, -45, 2**32 + 1, 600851475143):
        print(f"   {value} = {format_factorization(factorize(value))}")

    print("\n5. Random primes...")
    from primekit.core.random_primes import random_prime_of_bit_length, random_primes_in_range

    for bits in (64, 256, 1024):
        start = time.perf_counter()
        p = random_prime_of_bit_length(bits)
        elapsed = time.perf_counter() - start
        print(f"   {bits}-bit prime in {elapsed:.3f}s: {str(p)[:40]}{'...' if len(str(p)) > 40 else ''}")

    print(f"   Five primes from [1000, 2000]: {sorted(random_primes_in_range(1000, 2000, 5))}")

    print("\n" + "=" * 50)
    print("Demo complete.")
    print("\nNext steps:")
    print("  - Run 'primekit --help' to see CLI options")
    print("  - Try 'primekit factor 600851475143 --generator trial_division'")


if __name__ == "__main__":
    main()
