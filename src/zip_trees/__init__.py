"""
zip_trees — Randomized binary search trees balanced by zip and unzip.

Quick-start imports::

    from zip_trees import create_zip_tree, ZipTree, RankSampler

    tree = ZipTree(RankSampler(seed=42))
    tree.insert(5)
    tree.search(5)
"""

# Shared primitives
from zip_trees.ancestors import AncestorCount, AncestorCounter
from zip_trees.base import Node, SearchResult, ZipTreeBase
from zip_trees.display import print_pretty
from zip_trees.errors import DuplicateKeyError, EmptyTreeError, KeyNotFoundError, ZipTreeError
from zip_trees.factory import TREE_VARIANTS, create_zip_tree

# Stats & invariants
from zip_trees.invariants import InvariantError, assert_tree_invariants_raise, check_keys
from zip_trees.rank_utils import RankSampler
from zip_trees.tree_stats import Stats, tree_stats_

# Variants
from zip_trees.zip_opt import ZipTreeOptimized
from zip_trees.zip_rec import ZipTreeRecursive
from zip_trees.zip_tree import ZipTree

__all__ = [
    "TREE_VARIANTS",
    "AncestorCount",
    "AncestorCounter",
    "DuplicateKeyError",
    "EmptyTreeError",
    "InvariantError",
    "KeyNotFoundError",
    "Node",
    "RankSampler",
    "SearchResult",
    "Stats",
    "ZipTree",
    "ZipTreeBase",
    "ZipTreeError",
    "ZipTreeOptimized",
    "ZipTreeRecursive",
    "assert_tree_invariants_raise",
    "check_keys",
    "create_zip_tree",
    "print_pretty",
    "tree_stats_",
]
