"""Sources of randomness for the roll executor.

Any object with a ``next_int(minimum, maximum)`` method can be passed to
the roller, so tests can script exact die faces.
"""

import random
from typing import Protocol


class RandomSource(Protocol):
    """Supplies uniformly distributed integers."""

    def next_int(self, minimum: int, maximum: int) -> int:
        """Return an integer N with minimum <= N <= maximum."""
        ...


class SystemRandomSource:
    """Random source backed by the operating system's entropy pool.

    Holds no generator state of its own, so one instance can be shared
    between threads.
    """

    def __init__(self) -> None:
        self._random = random.SystemRandom()

    def next_int(self, minimum: int, maximum: int) -> int:
        return self._random.randint(minimum, maximum)


class SeededRandomSource:
    """Reproducible random source for replays and fixed-seed rolls.

    Each instance owns a private generator; use one instance per caller.

    Args:
        seed: Seed for the underlying generator.
    """

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed
        self._random = random.Random(seed)

    def next_int(self, minimum: int, maximum: int) -> int:
        return self._random.randint(minimum, maximum)
