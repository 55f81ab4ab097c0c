"""Rank sampling for zip-tree nodes."""

from typing import List, Optional

import numpy as np

DEFAULT_P = 0.5


def geom_sample(rng: np.random.Generator, p: float = DEFAULT_P) -> int:
    """
    Draw one rank from a geometric distribution starting at 0.

    The result is the number of successful coin flips (probability ``p``)
    before the first failure, so for ``p = 0.5`` the mean rank is 1.

    Args:
        rng: The generator to draw from.
        p: Probability of a "head", i.e. of increasing the rank by one.

    Returns:
        A non-negative rank as an integer.
    """
    # numpy counts trials up to and including the first success (support >= 1),
    # with success probability 1 - p here meaning "tail".
    return int(rng.geometric(1.0 - p)) - 1


class RankSampler:
    """
    Seedable source of node ranks.

    Each tree owns (or shares, if the caller passes the same instance) a
    sampler. ``seed=None`` draws fresh entropy from the operating system.
    """

    __slots__ = ("p", "seed", "_rng")

    def __init__(self, seed: Optional[int] = None, p: float = DEFAULT_P):
        if not 0.0 < p < 1.0:
            raise ValueError(f"p must lie strictly between 0 and 1, got {p!r}")
        self.p = p
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def sample(self) -> int:
        """Return a fresh rank, independent of all previous calls."""
        return geom_sample(self._rng, self.p)

    def sample_many(self, n: int) -> List[int]:
        """Return ``n`` ranks in one vectorized draw."""
        if n < 0:
            raise ValueError(f"n must be >= 0, got {n}")
        ranks = self._rng.geometric(1.0 - self.p, size=n) - 1
        return [int(r) for r in ranks]

    def reseed(self, seed: Optional[int] = None) -> None:
        """Restart the rank stream from ``seed``."""
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(seed={self.seed!r}, p={self.p!r})"
