"""Tests for the zip-tree factory."""

import unittest

from zip_trees import (
    TREE_VARIANTS,
    AncestorCounter,
    RankSampler,
    ZipTree,
    ZipTreeOptimized,
    ZipTreeRecursive,
    create_zip_tree,
)


class TestCreateZipTree(unittest.TestCase):

    def test_variants(self):
        expected = {
            "iterative": ZipTree,
            "recursive": ZipTreeRecursive,
            "optimized": ZipTreeOptimized,
            "ancestors": AncestorCounter,
        }
        self.assertEqual(set(TREE_VARIANTS), set(expected))
        for name, TreeClass in expected.items():
            with self.subTest(variant=name):
                tree = create_zip_tree(name, seed=0)
                self.assertIs(type(tree), TreeClass)
                self.assertTrue(tree.is_empty())

    def test_unknown_variant(self):
        with self.assertRaises(ValueError):
            create_zip_tree("avl")

    def test_seed_reproduces_shape(self):
        trees = [create_zip_tree("iterative", seed=99) for _ in range(2)]
        for tree in trees:
            for key in range(100):
                tree.insert(key)
        self.assertEqual(trees[0].snapshot(), trees[1].snapshot())

    def test_shared_sampler(self):
        sampler = RankSampler(seed=4)
        tree = create_zip_tree("optimized", sampler=sampler)
        self.assertIs(tree.sampler, sampler)

    def test_threshold(self):
        tree = create_zip_tree("ancestors", threshold=3)
        self.assertEqual(tree.threshold, 3)


if __name__ == "__main__":
    unittest.main()
