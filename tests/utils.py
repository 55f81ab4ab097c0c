"""Utility functions for testing zip-tree invariants."""

from typing import Optional

from zip_trees.base import ZipTreeBase
from zip_trees.invariants import TREE_FLAGS
from zip_trees.tree_stats import Stats


def assert_tree_invariants_tc(tc, t: ZipTreeBase, stats: Stats, err_msg: Optional[str] = "") -> None:
    """TestCase version: use inside unittest.TestCase methods."""
    for flag in TREE_FLAGS:
        tc.assertTrue(
            getattr(stats, flag),
            f"Invariant failed: {flag} is False \n\n{err_msg}"
        )

    tc.assertEqual(
        stats.node_count, len(t),
        f"Invariant failed: node_count={stats.node_count} ≠ len(tree)={len(t)}\n\n{err_msg}"
    )

    if not t.is_empty():
        tc.assertEqual(
            stats.height, t.depth(),
            f"Invariant failed: height={stats.height} ≠ depth()={t.depth()}\n\n{err_msg}"
        )
        tc.assertGreaterEqual(
            stats.rank, 0,
            f"Invariant failed: rank={stats.rank} < 0 for non-empty tree\n\n{err_msg}"
        )
        tc.assertIsNotNone(
            stats.least_key,
            f"Invariant failed: least_key is None for non-empty tree\n\n{err_msg}"
        )
        tc.assertIsNotNone(
            stats.greatest_key,
            f"Invariant failed: greatest_key is None for non-empty tree\n\n{err_msg}"
        )
