"""Seedable random source for random polynomials.

Use set_seed(n) at test start for reproducibility.
Default (no seed) uses os.urandom.
"""

import os
import random as _random
from contextvars import ContextVar


class DeterministicRNG:
    """Seeded PRNG wrapper. When seed is None, uses os.urandom."""

    def __init__(self, seed=None):
        self.seed = seed
        self._rng = _random.Random(seed) if seed is not None else None

    def randbelow(self, n: int) -> int:
        if n <= 0:
            raise ValueError(f"randbelow bound must be positive, got {n}")
        if self._rng is not None:
            return self._rng.randrange(n)
        return int.from_bytes(os.urandom(16), 'big') % n

    def randint(self, a: int, b: int) -> int:
        """Integer in [a, b], both ends included."""
        return a + self.randbelow(b - a + 1)


# Per thread/task; the unseeded default holds no state of its own.
_current_rng: ContextVar[DeterministicRNG] = ContextVar(
    'current_rng', default=DeterministicRNG(seed=None))


def set_seed(seed: int | None):
    """Seed the current thread or task. None = os-level randomness."""
    _current_rng.set(DeterministicRNG(seed=seed))


def randbelow(n: int) -> int:
    return _current_rng.get().randbelow(n)


def randint(a: int, b: int) -> int:
    return _current_rng.get().randint(a, b)
