"""Helpers over an injectable random source.

Anything exposing ``random() -> float`` in ``[0, 1)`` can drive the
simulations: ``random.Random`` for real runs, a fixed sequence in tests.
"""

import math
import random
from typing import Optional, Protocol


class RandomSource(Protocol):
    def random(self) -> float: ...


def default_source(seed: Optional[int] = None) -> RandomSource:
    """Create a random source, seeded when reproducible output is wanted."""
    return random.Random(seed)


def randint(rng: RandomSource, low: int, high: int) -> int:
    """Integer in ``[low, high]`` (both inclusive)."""
    return low + int(rng.random() * (high - low + 1))


def uniform(rng: RandomSource, low: float, high: float) -> float:
    """Float in ``[low, high)``."""
    return low + rng.random() * (high - low)


def round_half_up(value: float) -> int:
    """Nearest integer, halves rounded up."""
    return math.floor(value + 0.5)


def round1(value: float) -> float:
    """Round to one decimal place, halves rounded up."""
    return round_half_up(value * 10) / 10
