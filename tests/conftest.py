"""Shared fixtures for primekit tests."""

import logging
import random

import pytest

from primekit.core.generators import EratosthenesGenerator, Generator23, TrialDivisionGenerator


@pytest.fixture(params=[EratosthenesGenerator, TrialDivisionGenerator, Generator23])
def generator_cls(request):
    """Each concrete generator class."""
    return request.param


@pytest.fixture(params=[EratosthenesGenerator, TrialDivisionGenerator])
def exact_generator_cls(request):
    """Generators that emit primes only."""
    return request.param


@pytest.fixture
def rng():
    """Seeded random source for reproducible tests."""
    return random.Random(12345)


@pytest.fixture(autouse=True)
def reset_primekit_logger():
    """Drop handlers installed by setup_logger so they do not outlive the test."""
    yield
    logger = logging.getLogger("primekit")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
