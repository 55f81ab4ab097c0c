"""Zip-tree with a relaxed tie rule on insertion.

A new node continues past every node of equal rank, whichever side the
key falls on. Equal-rank nodes may therefore appear as left children too,
which spreads rank ties over both sides and lowers the expected height.
Deletion and search are those of :class:`ZipTree`.
"""

from zip_trees.base import Node
from zip_trees.zip_tree import ZipTree


class ZipTreeOptimized(ZipTree):
    """Iterative zip-tree that admits rank ties on both edges."""
    __slots__ = ()

    ALLOW_LEFT_TIES = True

    def _descends_past(self, node: Node, current: Node) -> bool:
        return node.rank <= current.rank
