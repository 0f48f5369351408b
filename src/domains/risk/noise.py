"""Perturbation sources for the transaction evaluator."""

import random
from typing import Protocol


class NoiseSource(Protocol):
    def __call__(self, upper: float) -> float:
        """Return a value in [0, upper)."""
        ...


class SeededNoise:
    """Uniform noise from a private, optionally seeded generator."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def __call__(self, upper: float) -> float:
        return self._rng.random() * upper


class FixedNoise:
    """Always returns the same value. Used to make scoring reproducible."""

    def __init__(self, value: float = 0.0) -> None:
        if value < 0:
            raise ValueError("noise must be non-negative")
        self._value = value

    def __call__(self, upper: float) -> float:
        if self._value >= upper:
            raise ValueError(f"fixed noise {self._value} is outside [0, {upper})")
        return self._value
