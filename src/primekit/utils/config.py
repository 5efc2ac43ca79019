"""Engine configuration.

A single dataclass selects the generator strategy, the Miller-Rabin round
count, the sieve segment bound and an optional seed. It round-trips through
JSON so that a run can be repeated with the same settings.
"""

import json
import random
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, Optional, Union

from primekit.core.generators import GENERATORS, EratosthenesGenerator, PseudoPrimeGenerator, create_generator
from primekit.core.primality import DEFAULT_ROUNDS
from primekit.core.tables import DEFAULT_MAX_SEGMENT_SIZE


def _is_int(value: Any) -> bool:
    # JSON true/false load as bool, which subclasses int
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class EngineConfig:
    """Settings shared by the CLI and library callers."""
    generator: str = "eratosthenes"
    rounds: int = DEFAULT_ROUNDS
    max_segment_size: int = DEFAULT_MAX_SEGMENT_SIZE
    seed: Optional[int] = None  # None draws from the OS entropy pool

    def validate(self) -> "EngineConfig":
        for name, value in (("rounds", self.rounds), ("max_segment_size", self.max_segment_size)):
            if not _is_int(value):
                raise ValueError(f"{name} must be an integer, got {value!r}")
        if self.seed is not None and not _is_int(self.seed):
            raise ValueError(f"seed must be an integer or null, got {self.seed!r}")
        if not isinstance(self.generator, str) or self.generator not in GENERATORS:
            raise ValueError(f"Unknown generator: {self.generator}. Choose from {list(GENERATORS.keys())}")
        if self.rounds < 1:
            raise ValueError(f"rounds must be >= 1, got {self.rounds}")
        if self.max_segment_size < 2 or self.max_segment_size % 2:
            raise ValueError(
                f"max_segment_size must be a positive even number, got {self.max_segment_size}"
            )
        return self

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "EngineConfig":
        return cls(**{k: v for k, v in d.items() if k in cls.__dataclass_fields__}).validate()

    def save(self, path: Union[str, Path]) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)
        return path

    @classmethod
    def load(cls, path: Union[str, Path]) -> "EngineConfig":
        with open(path) as f:
            return cls.from_dict(json.load(f))

    def make_generator(self) -> PseudoPrimeGenerator:
        """Build a fresh generator of the configured kind."""
        cls = GENERATORS.get(self.generator)
        if cls is EratosthenesGenerator:
            return EratosthenesGenerator(max_segment_size=self.max_segment_size)
        return create_generator(self.generator)

    def make_rng(self) -> random.Random:
        """Seeded ``random.Random`` if a seed is set, else ``SystemRandom``."""
        if self.seed is None:
            return random.SystemRandom()
        return random.Random(self.seed)
