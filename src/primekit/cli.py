"""Command-line interface for primekit."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from primekit.core.generators import GENERATORS, enumerate_primes, first_primes
from primekit.utils.config import EngineConfig
from primekit.utils.log import setup_logger

logger = logging.getLogger(__name__)


def format_factorization(factors: list) -> str:
    """Render ``[(2, 3), (5, 1)]`` as ``2^3 * 5``."""
    if not factors:
        return "1"
    terms = [str(p) if e == 1 else f"{p}^{e}" for p, e in factors]
    return " * ".join(terms)


def cmd_primes(args: argparse.Namespace, config: EngineConfig) -> int:
    """Print every prime up to a limit."""
    generator = config.make_generator()
    logger.debug("Enumerating primes <= %d with %r", args.limit, generator)

    count = 0
    for p in enumerate_primes(args.limit, generator):
        print(p)
        count += 1

    logger.info("%d values up to %d", count, args.limit)
    return 0


def cmd_first(args: argparse.Namespace, config: EngineConfig) -> int:
    """Print the first N primes."""
    for p in first_primes(args.count, config.make_generator()):
        print(p)
    return 0


def cmd_isprime(args: argparse.Namespace, config: EngineConfig) -> int:
    """Run Miller-Rabin on a single number."""
    from primekit.core.primality import is_probable_prime

    rounds = args.rounds if args.rounds is not None else config.rounds
    result = is_probable_prime(args.n, rounds, config.make_rng())

    verdict = "probably prime" if result else "composite"
    print(f"{args.n}: {verdict}")
    if result:
        logger.info("Error probability <= 4^-%d", rounds)
    return 0 if result else 1


def cmd_factor(args: argparse.Namespace, config: EngineConfig) -> int:
    """Factor an integer."""
    from primekit.core.factorization import factorize

    try:
        factors = factorize(args.n, config.make_generator())
    except ZeroDivisionError as e:
        logger.error("Error: %s", e)
        return 1

    print(f"{args.n} = {format_factorization(factors)}")
    return 0


def cmd_random(args: argparse.Namespace, config: EngineConfig) -> int:
    """Generate random primes by bit length or from a range."""
    from primekit.core.random_primes import random_prime_of_bit_length, random_primes_in_range

    rng = config.make_rng()

    if args.range is not None:
        start, stop = args.range
        primes = random_primes_in_range(start, stop, args.count, config.make_generator(), rng)
        for p in primes:
            print(p)
        return 0 if len(primes) == args.count else 1

    for _ in range(args.count):
        p = random_prime_of_bit_length(args.bits, config.rounds, rng)
        print(p)
    return 0


def build_config(args: argparse.Namespace) -> EngineConfig:
    """Load the config file, if any, and apply command-line overrides."""
    config = EngineConfig.load(args.config) if args.config else EngineConfig()

    if getattr(args, "generator", None) is not None:
        config.generator = args.generator
    if args.seed is not None:
        config.seed = args.seed

    return config.validate()


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="primekit",
        description="Prime enumeration, primality testing and factorization",
    )
    parser.add_argument("--config", type=Path, default=None, help="JSON engine config")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible randomness")
    parser.add_argument("--verbose", "-v", action="store_true", help="Show debug output")
    parser.add_argument("--log-file", type=Path, default=None, help="Also log to this file")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    generator_choices = sorted(GENERATORS.keys())

    primes_parser = subparsers.add_parser("primes", help="List primes up to a limit")
    primes_parser.add_argument("--limit", type=int, default=100, help="Inclusive upper bound")
    primes_parser.add_argument("--generator", choices=generator_choices, default=None, help="Generator strategy")

    first_parser = subparsers.add_parser("first", help="List the first N primes")
    first_parser.add_argument("--count", type=int, default=10, help="Number of primes")
    first_parser.add_argument("--generator", choices=generator_choices, default=None, help="Generator strategy")

    isprime_parser = subparsers.add_parser("isprime", help="Miller-Rabin primality test")
    isprime_parser.add_argument("n", type=int, help="Number to test")
    isprime_parser.add_argument("--rounds", type=int, default=None, help="Witness rounds")

    factor_parser = subparsers.add_parser("factor", help="Factor an integer")
    factor_parser.add_argument("n", type=int, help="Number to factor")
    factor_parser.add_argument("--generator", choices=generator_choices, default=None, help="Generator strategy")

    random_parser = subparsers.add_parser("random", help="Generate random primes")
    mode = random_parser.add_mutually_exclusive_group(required=True)
    mode.add_argument("--bits", type=int, help="Bit length of each prime")
    mode.add_argument("--range", type=int, nargs=2, metavar=("START", "STOP"), help="Inclusive range")
    random_parser.add_argument("--count", type=int, default=1, help="Number of primes")
    random_parser.add_argument("--generator", choices=generator_choices, default=None, help="Generator for --range")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    setup_logger(args.log_file, verbose=args.verbose)

    try:
        config = build_config(args)
    except (OSError, ValueError) as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    commands = {
        "primes": cmd_primes,
        "first": cmd_first,
        "isprime": cmd_isprime,
        "factor": cmd_factor,
        "random": cmd_random,
    }

    try:
        return commands[args.command](args, config)
    except ValueError as e:
        logger.error("Error: %s", e)
        return 2


if __name__ == "__main__":
    sys.exit(main())
