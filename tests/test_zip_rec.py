"""Tests for the recursive zip-tree."""

import random
import unittest

from zip_trees.rank_utils import RankSampler
from zip_trees.zip_rec import ZipTreeRecursive
from zip_trees.zip_tree import ZipTree
from tests.base import (
    EXAMPLE_KEYS,
    EXAMPLE_RANKS,
    HistoryIndependenceMixin,
    TreeContractMixin,
    ZipTreeTestCase,
)


class TestZipTreeRecursive(TreeContractMixin, HistoryIndependenceMixin, ZipTreeTestCase):
    TREE_CLASS = ZipTreeRecursive

    def test_example_shape(self):
        self.tree = self.build_tree(EXAMPLE_KEYS, EXAMPLE_RANKS)
        self.assertEqual(
            self.tree.snapshot(),
            (5, 2, (1, 0, None, (3, 0, None, (4, 0, None, None))), (8, 1, None, None)),
        )
        self.tree.delete(5)
        self.assertEqual(self.tree.snapshot(), (8, 1, (1, 0, None, (3, 0, None, (4, 0, None, None))), None))
        self.expected_keys = [1, 3, 4, 8]

    def test_merge(self):
        tree = self.build_tree([2, 4], [3, 1])
        other = self.build_tree([8, 6], [2, 0])
        merged = tree._merge(tree.root, other.root)
        self.assertEqual(merged.key, 2)
        self.assertEqual(merged.right.key, 8)
        self.assertEqual(merged.right.left.key, 4)
        self.assertEqual(merged.right.left.right.key, 6)
        self.assertIsNone(tree._merge(None, None))
        self.assertIs(tree._merge(None, other.root), other.root)


class TestRecursiveMatchesIterative(unittest.TestCase):
    """Both formulations must build identical shapes for identical ranks."""

    def test_same_shapes_after_every_operation(self):
        rng = random.Random(31)
        sampler = RankSampler(31)
        iterative = ZipTree()
        recursive = ZipTreeRecursive()

        keys = rng.sample(range(5000), 250)
        for key, rank in zip(keys, sampler.sample_many(len(keys))):
            iterative.insert(key, rank)
            recursive.insert(key, rank)
            self.assertEqual(iterative.snapshot(), recursive.snapshot(), f"shapes differ after inserting {key}")

        for key in rng.sample(keys, 125):
            iterative.delete(key)
            recursive.delete(key)
            self.assertEqual(iterative.snapshot(), recursive.snapshot(), f"shapes differ after deleting {key}")

        self.assertEqual(iterative.depth(), recursive.depth())
        self.assertEqual(list(iterative), list(recursive))


if __name__ == "__main__":
    unittest.main()
