"""Shared random source for value generation.

Use set_seed(n) (or `with seeded(n):`) to make generated values reproducible.
Default (no seed) draws from OS entropy via random.SystemRandom.
"""

import contextlib
import logging
import random as _random
import threading

logger = logging.getLogger(__name__)


class RandomSource:
    """Seeded PRNG wrapper. When seed is None, uses OS entropy."""

    def __init__(self, seed: int | None = None):
        self._seed = seed
        if seed is not None:
            self._rng = _random.Random(seed)
        else:
            self._rng = _random.SystemRandom()
        self._lock = threading.Lock()

    @property
    def seed(self) -> int | None:
        return self._seed

    def randbelow(self, n: int) -> int:
        """Uniform integer in [0, n)."""
        if n < 1:
            raise ValueError(f"randbelow bound must be positive, got {n}")
        with self._lock:
            return self._rng.randrange(n)

    def randint(self, a: int, b: int) -> int:
        """Uniform integer in [a, b], both ends included."""
        with self._lock:
            return self._rng.randint(a, b)

    def random(self) -> float:
        with self._lock:
            return self._rng.random()

    def choice(self, seq):
        return seq[self.randbelow(len(seq))]

    def __repr__(self):
        return f"RandomSource(seed={self._seed!r})"


# Global instance
_global_source = RandomSource(seed=None)


def get_source() -> RandomSource:
    return _global_source


def set_seed(seed: int | None) -> RandomSource:
    """Set global seed for reproducibility. None = OS entropy."""
    global _global_source
    _global_source = RandomSource(seed=seed)
    logger.debug("anyvalue random source reseeded with seed=%r", seed)
    return _global_source


@contextlib.contextmanager
def seeded(seed: int | None):
    """Temporarily replace the global source, restoring the previous one on exit."""
    global _global_source
    previous = _global_source
    source = set_seed(seed)
    try:
        yield source
    finally:
        _global_source = previous


def randbelow(n: int) -> int:
    return _global_source.randbelow(n)


def randint(a: int, b: int) -> int:
    return _global_source.randint(a, b)


def random() -> float:
    return _global_source.random()


def choice(seq):
    return _global_source.choice(seq)
