"""Seedable random number source shared by the game."""

from __future__ import annotations

import random
import time
from functools import lru_cache
from typing import Optional

from gemswap.vectors import Vec3


class RandomSource:
    """Uniform random numbers from a private generator."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._engine = random.Random()
        self.reseed(seed)

    def reseed(self, seed: Optional[int] = None) -> None:
        """Seed the generator; without a seed, the current clock is used."""
        self._engine.seed(time.monotonic_ns() if seed is None else seed)

    def real(self, low: float, high: float) -> float:
        return self._engine.uniform(low, high)

    def integer(self, low: int, high: int) -> int:
        """A random integer in the closed range ``[low, high]``."""
        return self._engine.randint(low, high)

    def inside_unit_sphere(self) -> Vec3:
        return Vec3(
            self._engine.uniform(0.0, 1.1),
            self._engine.uniform(0.0, 1.1),
            self._engine.uniform(0.0, 1.1),
        )


@lru_cache(maxsize=None)
def get_random() -> RandomSource:
    """The process-wide random source."""
    return RandomSource()