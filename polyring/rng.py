"""Random source for coefficient sampling.

Call set_seed(n) before a test run to make sampled polynomials reproducible.
Without a seed, values come from os.urandom.
"""

import os
import random as _random


class CoefficientRNG:
    """Seeded sampler of integers in [0, n). seed=None samples from os.urandom."""

    def __init__(self, seed=None):
        self.seed = seed
        self._rng = _random.Random(seed) if seed is not None else None

    def randbelow(self, n: int) -> int:
        if n <= 0:
            raise ValueError(f"randbelow needs a positive bound, got {n}")
        if self._rng is not None:
            return self._rng.randrange(n)
        # 32 bytes keeps the modulo bias negligible for 127-bit bounds
        return int.from_bytes(os.urandom(32), 'big') % n


_source = CoefficientRNG()


def set_seed(seed: int | None):
    """Replace the module-wide source. None restores OS randomness."""
    global _source
    _source = CoefficientRNG(seed=seed)


def get_seed() -> int | None:
    return _source.seed


def randbelow(n: int) -> int:
    return _source.randbelow(n)
