"""Counting low and high ancestors on a zip-tree search path.

For a search key ``x`` and a rank threshold ``k``, a *low ancestor* is a
node on the search path with key smaller than ``x`` and rank at most ``k``;
a *high ancestor* is the symmetric case with a larger key. Their expected
number is bounded by a lemma of the zip-tree analysis; the experiment in
``stats/count_low_ancestors.py`` measures it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from zip_trees.rank_utils import RankSampler
from zip_trees.zip_tree import ZipTree

DEFAULT_THRESHOLD = 1


@dataclass(frozen=True)
class AncestorCount:
    """Result of :meth:`AncestorCounter.count_ancestors`."""
    __slots__ = ("found", "low", "high")

    found: bool
    low: int
    high: int


class AncestorCounter(ZipTree):
    """
    Iterative zip-tree with an instrumented, read-only search.

    Attributes:
        threshold (int): Highest rank an ancestor may have to be counted.
    """
    __slots__ = ("threshold",)

    def __init__(self, sampler: Optional[RankSampler] = None, threshold: int = DEFAULT_THRESHOLD):
        super().__init__(sampler)
        self.threshold = DEFAULT_THRESHOLD
        self.set_threshold(threshold)

    def set_threshold(self, k: int) -> None:
        if not isinstance(k, int) or isinstance(k, bool):
            raise TypeError(f"set_threshold(): k must be an int, got {type(k).__name__}")
        if k < 0:
            raise ValueError(f"set_threshold(): k must be >= 0, got {k}")
        self.threshold = k

    def count_ancestors(self, key) -> AncestorCount:
        """
        Search for ``key`` and count the rank-bounded ancestors passed on the way.

        Nodes above the threshold are traversed but not counted. Counting
        starts from zero on every call; the tree is not modified.

        Returns:
            AncestorCount: ``found`` plus the low and high ancestor counts.
        """
        k = self.threshold
        low = high = 0
        cur = self.root
        while cur is not None:
            if key == cur.key:
                return AncestorCount(True, low, high)
            if cur.key < key:
                if cur.rank <= k:
                    low += 1
                cur = cur.right
            else:
                if cur.rank <= k:
                    high += 1
                cur = cur.left
        return AncestorCount(False, low, high)
