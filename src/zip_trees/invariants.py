"""Shared invariant-checking utilities.

Used by the experiment scripts and the test suite alike.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List, Optional, Tuple

from zip_trees.logging_config import get_logger

logger = get_logger(__name__)

if TYPE_CHECKING:
    from zip_trees.base import ZipTreeBase
    from zip_trees.tree_stats import Stats

TREE_FLAGS = (
    "is_heap",
    "is_search_tree",
)


class InvariantError(Exception):
    """Raised when a zip-tree invariant is violated."""


def assert_tree_invariants_raise(
    t: ZipTreeBase,
    stats: Stats,
) -> None:
    """Check all invariants, raising :class:`InvariantError` on the first failure."""
    for flag in TREE_FLAGS:
        if not getattr(stats, flag):
            raise InvariantError(f"Invariant failed: {flag} is False")

    if stats.node_count != len(t):
        raise InvariantError(f"Invariant failed: node_count={stats.node_count} ≠ len(tree)={len(t)}")

    if not t.is_empty():
        if stats.height != t.depth():
            raise InvariantError(f"Invariant failed: height={stats.height} ≠ depth()={t.depth()}")
        if stats.least_key is None:
            raise InvariantError("Invariant failed: least_key is None for non-empty tree")
        if stats.greatest_key is None:
            raise InvariantError("Invariant failed: greatest_key is None for non-empty tree")
    elif stats.height != -1:
        raise InvariantError(f"Invariant failed: height={stats.height} ≠ -1 for empty tree")


def check_keys(
    tree: ZipTreeBase,
    expected_keys: Optional[Iterable] = None,
) -> Tuple[List, bool, bool]:
    """Traverse the tree in order and validate its keys.

    Returns
    -------
    (keys, presence_ok, order_ok)
    """
    keys = list(tree)
    order_ok = all(a < b for a, b in zip(keys, keys[1:]))

    presence_ok = True
    if expected_keys is not None:
        expected = list(expected_keys)
        presence_ok = len(keys) == len(expected) and set(keys) == set(expected)

    return keys, presence_ok, order_ok
