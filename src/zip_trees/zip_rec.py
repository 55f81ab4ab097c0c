"""Recursive zip-tree.

Same tie rule and therefore the same shapes as :class:`~zip_trees.zip_tree.ZipTree`
for a given rank assignment. Unzipping happens implicitly while the
recursion unwinds; deletion merges the two subtrees with ``_merge``.
Recursion depth equals the depth of the touched node, which is
O(log n) in expectation.
"""

from __future__ import annotations

from typing import Optional

from zip_trees.base import Node, ZipTreeBase, debug_log
from zip_trees.errors import DuplicateKeyError, KeyNotFoundError


class ZipTreeRecursive(ZipTreeBase):
    """Zip-tree with recursive insert and delete."""
    __slots__ = ()

    def _insert_node(self, node: Node) -> None:
        self.root = self._insert_at(node, self.root)

    def _insert_at(self, x: Node, node: Optional[Node]) -> Node:
        """
        Insert ``x`` below ``node`` and return the root of the resulting subtree.

        Returning ``x`` itself signals the caller that ``x`` has not been
        absorbed yet: the caller either adopts it as a child or is displaced
        by it, in which case the caller's subtree on the far side of ``x``
        becomes the matching child of ``x``.
        """
        if node is None:
            return x
        if x.key == node.key:
            debug_log("insert(%r): duplicate key", x.key)
            raise DuplicateKeyError(x.key)

        if x.key < node.key:
            if self._insert_at(x, node.left) is x:
                if x.rank < node.rank:
                    node.left = x
                else:
                    node.left = x.right
                    x.right = node
                    return x
        else:
            if self._insert_at(x, node.right) is x:
                if x.rank <= node.rank:
                    node.right = x
                else:
                    node.right = x.left
                    x.left = node
                    return x
        return node

    def _delete_key(self, key) -> None:
        self.root = self._delete_at(key, self.root)

    def _delete_at(self, key, node: Optional[Node]) -> Optional[Node]:
        if node is None:
            debug_log("delete(%r): key not found", key)
            raise KeyNotFoundError(key)
        if key == node.key:
            merged = self._merge(node.left, node.right)
            node.left = node.right = None
            return merged
        if key < node.key:
            node.left = self._delete_at(key, node.left)
        else:
            node.right = self._delete_at(key, node.right)
        return node

    def _merge(self, x: Optional[Node], y: Optional[Node]) -> Optional[Node]:
        """Zip two subtrees where every key of ``x`` is below every key of ``y``."""
        if x is None:
            return y
        if y is None:
            return x
        if x.rank < y.rank:
            y.left = self._merge(x, y.left)
            return y
        x.right = self._merge(x.right, y)
        return x
