"""Zip-tree factory module."""

from typing import Dict, Optional, Type

from zip_trees.ancestors import DEFAULT_THRESHOLD, AncestorCounter
from zip_trees.base import ZipTreeBase
from zip_trees.rank_utils import RankSampler
from zip_trees.zip_opt import ZipTreeOptimized
from zip_trees.zip_rec import ZipTreeRecursive
from zip_trees.zip_tree import ZipTree

TREE_VARIANTS: Dict[str, Type[ZipTreeBase]] = {
    "iterative": ZipTree,
    "recursive": ZipTreeRecursive,
    "optimized": ZipTreeOptimized,
    "ancestors": AncestorCounter,
}


def create_zip_tree(
    variant: str = "iterative",
    seed: Optional[int] = None,
    sampler: Optional[RankSampler] = None,
    threshold: int = DEFAULT_THRESHOLD,
) -> ZipTreeBase:
    """
    Create a new, empty zip-tree of the requested variant.

    Args:
        variant: One of the keys of ``TREE_VARIANTS``.
        seed: Seed for a fresh ``RankSampler``; ignored when ``sampler`` is given.
        sampler: Rank source to share with other trees.
        threshold: Rank threshold, only used by the ``"ancestors"`` variant.

    Returns:
        An empty tree of the requested variant.
    """
    try:
        TreeClass = TREE_VARIANTS[variant]
    except KeyError:
        raise ValueError(
            f"Unknown variant {variant!r}; expected one of {sorted(TREE_VARIANTS)}"
        ) from None

    if sampler is None:
        sampler = RankSampler(seed)

    if TreeClass is AncestorCounter:
        return AncestorCounter(sampler, threshold=threshold)
    return TreeClass(sampler)
