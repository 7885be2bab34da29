"""Deterministic RNG wrapper built on top of random.Random."""
from __future__ import annotations

import secrets
from random import Random
from typing import Sequence, TypeVar

T_co = TypeVar("T_co")

_MAX_RANDOM_SEED = 2**31 - 1


class RNG:
    """Wrapper around random.Random; inject one per factory for reproducible draws."""

    def __init__(self, seed: int) -> None:
        self._seed = seed
        self._random = Random(seed)

    @classmethod
    def from_entropy(cls) -> "RNG":
        """Seed a fresh RNG from the operating system."""
        return cls(secrets.randbelow(_MAX_RANDOM_SEED))

    @property
    def seed(self) -> int:
        return self._seed

    def choice(self, seq: Sequence[T_co]) -> T_co:
        """Return a uniformly chosen element from the non-empty sequence."""
        if not seq:
            raise ValueError("Cannot choose from an empty sequence.")
        return self._random.choice(seq)
