"""Tests for the command-line interface."""

import pytest

from primekit.cli import format_factorization, main
from primekit.utils.config import EngineConfig


class TestFormatFactorization:

    def test_format(self):
        assert format_factorization([(2, 3), (3, 2), (5, 1)]) == "2^3 * 3^2 * 5"
        assert format_factorization([(-1, 1), (7, 1)]) == "-1 * 7"
        assert format_factorization([]) == "1"


class TestCommands:
    """Tests for CLI subcommands."""

    def test_no_command(self, capsys):
        assert main([]) == 1

    def test_primes(self, capsys):
        assert main(["primes", "--limit", "30"]) == 0
        out = capsys.readouterr().out.split()
        assert out == ["2", "3", "5", "7", "11", "13", "17", "19", "23", "29"]

    @pytest.mark.parametrize("generator", ["eratosthenes", "trial_division"])
    def test_primes_with_generator(self, generator, capsys):
        assert main(["primes", "--limit", "20", "--generator", generator]) == 0
        assert capsys.readouterr().out.split() == ["2", "3", "5", "7", "11", "13", "17", "19"]

    def test_first(self, capsys):
        assert main(["first", "--count", "5"]) == 0
        assert capsys.readouterr().out.split() == ["2", "3", "5", "7", "11"]

    def test_isprime(self, capsys):
        assert main(["--seed", "1", "isprime", "1000000007"]) == 0
        assert "probably prime" in capsys.readouterr().out
        assert main(["--seed", "1", "isprime", "561", "--rounds", "20"]) == 1
        assert "composite" in capsys.readouterr().out

    def test_factor(self, capsys):
        assert main(["factor", "-360"]) == 0
        assert capsys.readouterr().out.strip() == "-360 = -1 * 2^3 * 3^2 * 5"

    def test_factor_zero(self, capsys):
        assert main(["factor", "0"]) == 1

    def test_random_bits(self, capsys):
        assert main(["--seed", "5", "random", "--bits", "64", "--count", "2"]) == 0
        values = [int(v) for v in capsys.readouterr().out.split()]
        assert len(values) == 2
        assert all(v.bit_length() == 64 for v in values)

    def test_random_range(self, capsys):
        assert main(["--seed", "5", "random", "--range", "10", "30", "--count", "3"]) == 0
        values = [int(v) for v in capsys.readouterr().out.split()]
        assert len(values) == 3
        assert set(values) <= {11, 13, 17, 19, 23, 29}

    def test_random_range_short(self, capsys):
        assert main(["--seed", "5", "random", "--range", "10", "30", "--count", "10"]) == 1
        assert len(capsys.readouterr().out.split()) == 6

    def test_random_invalid_bits(self, capsys):
        assert main(["random", "--bits", "1"]) == 2

    def test_config_file(self, tmp_path, capsys):
        path = EngineConfig(generator="generator23").save(tmp_path / "engine.json")
        assert main(["--config", str(path), "primes", "--limit", "30"]) == 0
        assert "25" in capsys.readouterr().out.split()

    @pytest.mark.parametrize("contents", [
        '{"rounds": 0}',
        '{"rounds": "5"}',
        '{"max_segment_size": 1000.0}',
        '{"seed": "abc"}',
        '{"generator": ["mod6"]}',
    ])
    def test_invalid_config_file(self, tmp_path, contents):
        path = tmp_path / "engine.json"
        path.write_text(contents)
        assert main(["--config", str(path), "first"]) == 2

    def test_missing_config_file(self, tmp_path):
        assert main(["--config", str(tmp_path / "missing.json"), "first"]) == 2
