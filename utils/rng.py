"""
Randomness Sources.

This module provides the uniform integer sources a picker draws from.
Every source satisfies the `DrawSource` contract: `draw(n)` returns an
integer in [0, n), uniformly distributed and independent across calls.

Responsibility boundaries:
- Must be the ONLY source of randomness for pickers and experiments.
- Pickers accept a source instance, never instantiate `random` or `numpy.random` themselves.

Mutation constraints:
- The internal state of a source is mutated only when drawing random numbers.
- The seed can only be set once during initialization.
"""

import random
from typing import Iterable, List, Optional, Protocol

import numpy as np


class DrawSource(Protocol):
    """Anything with a uniform `draw(n)` in [0, n)."""

    def draw(self, n: int) -> int:
        ...


class CentralizedRNG:
    """
    A centralized random number generator to enforce reproducibility.
    Backed by the standard library Mersenne Twister.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        """
        Initialize the RNG with a specific seed.

        Args:
            seed: An integer seed for deterministic execution.
        """
        self._rng_instance = random.Random(seed)

    def draw(self, n: int) -> int:
        """Return a random integer in [0, n)."""
        return self._rng_instance.randrange(n)


class NumpyRNG:
    """
    Same contract as CentralizedRNG, backed by numpy's PCG64 Generator.
    Used by experiments that also consume bulk arrays of draws.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self._generator = np.random.default_rng(seed)

    def draw(self, n: int) -> int:
        """Return a random integer in [0, n) as a plain Python int."""
        return int(self._generator.integers(n))

    def draw_array(self, n: int, count: int) -> np.ndarray:
        """Return `count` independent draws from [0, n)."""
        return self._generator.integers(n, size=count)


class ReplayRNG:
    """
    Replays a fixed script of draws, for deterministic tests and audit replay.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self._values: List[int] = list(values)
        self._position = 0

    @property
    def consumed(self) -> int:
        """Number of scripted values handed out so far."""
        return self._position

    def draw(self, n: int) -> int:
        if self._position >= len(self._values):
            raise RuntimeError(f"Replay script exhausted after {self._position} draws.")
        value = self._values[self._position]
        if not 0 <= value < n:
            raise ValueError(f"Scripted draw {value} is outside [0, {n}).")
        self._position += 1
        return value
