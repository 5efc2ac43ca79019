"""Tests for factorization and extended Euclid helpers."""

import random

import pytest

from primekit.core.arith import egcd, is_coprime, mod_inverse
from primekit.core.factorization import factorize, int_from_factorization
from primekit.core.generators import EratosthenesGenerator, Generator23, TrialDivisionGenerator

from reference import slow_is_prime


def check_factorization(value, factors):
    primes = [p for p, _ in factors if p != -1]
    assert primes == sorted(set(primes))
    assert all(e >= 1 for _, e in factors)
    assert all(slow_is_prime(p) for p in primes)
    assert int_from_factorization(factors) == value


class TestFactorize:
    """Tests for factorize."""

    def test_known_values(self):
        """Test hand-checked factorizations."""
        assert factorize(45) == [(3, 2), (5, 1)]
        assert factorize(360) == [(2, 3), (3, 2), (5, 1)]
        assert factorize(97) == [(97, 1)]
        assert factorize(1024) == [(2, 10)]

    def test_negative(self, generator_cls):
        """Negative values get a leading (-1, 1)."""
        assert factorize(-45, generator_cls()) == [(-1, 1), (3, 2), (5, 1)]
        assert factorize(-1, generator_cls()) == [(-1, 1)]

    def test_one(self, generator_cls):
        """1 has an empty factorization."""
        assert factorize(1, generator_cls()) == []

    def test_zero(self, generator_cls):
        """Zero raises ZeroDivisionError."""
        with pytest.raises(ZeroDivisionError):
            factorize(0, generator_cls())

    def test_non_integer(self):
        with pytest.raises(TypeError):
            factorize(12.0)

    def test_round_trip_small(self, generator_cls):
        """Every integer up to 5000 reconstructs from its factors."""
        for x in range(1, 5001):
            check_factorization(x, factorize(x, generator_cls()))

    def test_round_trip_sampled(self, generator_cls):
        """Sampled integers up to 10**6 reconstruct from their factors."""
        rng = random.Random(2024)
        for x in rng.sample(range(5001, 10**6 + 1), 300):
            check_factorization(x, factorize(x, generator_cls()))

    def test_round_trip_contiguous_generator23(self):
        """Every integer up to 10**5 reconstructs with the default generator."""
        for x in range(1, 10**5 + 1):
            assert int_from_factorization(factorize(x)) == x

    @pytest.mark.slow
    def test_round_trip_full_range(self, generator_cls):
        """Every integer up to 10**6 reconstructs with each generator."""
        for x in range(1, 10**6 + 1):
            factors = factorize(x, generator_cls())
            assert int_from_factorization(factors) == x
            assert all(a[0] < b[0] for a, b in zip(factors, factors[1:]))

    def test_generators_agree(self):
        """All generators give the same factorization."""
        for x in (2 * 3 * 5 * 7 * 11 * 13, 999983 * 2, 49 * 25 * 121, 10**6):
            expected = factorize(x, EratosthenesGenerator())
            assert factorize(x, TrialDivisionGenerator()) == expected
            assert factorize(x, Generator23()) == expected

    def test_large_prime_cofactor(self):
        """A large prime cofactor is appended once the scan passes its root."""
        p = 1000000007
        assert factorize(12 * p) == [(2, 2), (3, 1), (p, 1)]

    def test_semiprime_with_moderate_factors(self):
        """Two five-digit primes are separated."""
        assert factorize(10007 * 10009, TrialDivisionGenerator()) == [(10007, 1), (10009, 1)]

    def test_bounded_generator_leaves_residual(self):
        """A bound stops the scan and the remainder is appended as is."""
        gen = Generator23(upper_bound=5)
        assert factorize(2 * 7 * 11, gen) == [(2, 1), (77, 1)]


class TestIntFromFactorization:
    """Tests for int_from_factorization."""

    def test_basic(self):
        assert int_from_factorization([(3, 2), (5, 1)]) == 45

    def test_empty(self):
        assert int_from_factorization([]) == 1

    def test_negative(self):
        assert int_from_factorization([(-1, 1), (2, 2)]) == -4


class TestArith:
    """Tests for egcd helpers."""

    def test_egcd_bezout(self):
        """egcd returns a Bezout pair and the gcd."""
        for a, b in [(240, 46), (17, 5), (0, 9), (9, 0), (-12, 18), (65537, 3120)]:
            x, y, g = egcd(a, b)
            assert a * x + b * y == g
            assert g >= 0
            if a or b:
                assert a % g == 0 and b % g == 0

    def test_is_coprime(self):
        assert is_coprime(6, 35)
        assert not is_coprime(6, 27)
        assert is_coprime(65537, 3120)

    def test_mod_inverse(self):
        assert (mod_inverse(17, 3120) * 17) % 3120 == 1

    def test_mod_inverse_missing(self):
        with pytest.raises(ValueError):
            mod_inverse(6, 27)
