"""Tunable settings for the probabilistic stages of primality testing."""

from __future__ import annotations

import random
from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class PrimalityConfig:
    """Settings for arbitrary-precision primality testing.

    Attributes:
        probable_prime_rounds: Random-base Miller-Rabin rounds run before
            the Baillie-PSW gate.
        seed: Seed for the witness generator. None draws fresh randomness
            on every call.
    """

    probable_prime_rounds: int = 25
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.probable_prime_rounds < 1:
            raise ValueError(
                f"probable_prime_rounds must be >= 1, got {self.probable_prime_rounds}"
            )

    def make_rng(self) -> random.Random:
        """Create the random source used to draw Miller-Rabin witnesses."""
        return random.Random(self.seed)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> PrimalityConfig:
        return cls(**{k: v for k, v in d.items() if k in cls.__dataclass_fields__})


DEFAULT_CONFIG = PrimalityConfig()
