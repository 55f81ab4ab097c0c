"""Iterative zip-tree: insertion by unzipping, deletion by zipping.

Follows "Zip Trees" (Tarjan, Levy, Timmel; WADS 2019). Ranks are max-heap
ordered; among equal ranks the smaller key is the ancestor, so a left child
always has a strictly smaller rank than its parent while a right child may
tie with it.

Complexity (n = number of keys, h = height, O(log n) expected):

+-------------+----------------------------+
| Operation   | Time                       |
+=============+============================+
| ``insert``  | O(h), no rotations         |
| ``delete``  | O(h), no rotations         |
| ``search``  | O(h)                       |
+-------------+----------------------------+
"""

from __future__ import annotations

from typing import Optional

from zip_trees.base import Node, ZipTreeBase, debug_log
from zip_trees.errors import DuplicateKeyError, KeyNotFoundError


class ZipTree(ZipTreeBase):
    """Baseline iterative zip-tree."""
    __slots__ = ()

    def _descends_past(self, node: Node, current: Node) -> bool:
        """Whether ``node`` belongs strictly below ``current`` in the heap order."""
        return node.rank < current.rank or (node.rank == current.rank and node.key > current.key)

    def _insert_node(self, node: Node) -> None:
        key = node.key

        # 1) Find the node to be displaced and its parent
        current = self.root
        previous: Optional[Node] = None
        while current is not None and self._descends_past(node, current):
            if key == current.key:
                debug_log("insert(%r): duplicate key", key)
                raise DuplicateKeyError(key)
            previous = current
            current = current.left if key < current.key else current.right

        # The rest of the search path lies inside the displaced subtree
        if self._path_contains(current, key):
            debug_log("insert(%r): duplicate key below rank %d", key, node.rank)
            raise DuplicateKeyError(key)

        # 2) Splice the new node into the slot of the displaced one
        if previous is None:
            self.root = node
        elif key < previous.key:
            previous.left = node
        else:
            previous.right = node

        if current is not None:
            self._unzip(node, current)

    def _unzip(self, node: Node, current: Node) -> None:
        """
        Split the subtree rooted at ``current`` by ``node.key`` and hang both halves below ``node``.

        Walks the search path for ``node.key`` once. Nodes with smaller keys
        form the right spine of ``node.left``, nodes with larger keys form the
        left spine of ``node.right``; each half keeps its internal order.
        """
        key = node.key
        left_tail: Optional[Node] = None
        right_tail: Optional[Node] = None

        while current is not None:
            if current.key < key:
                if left_tail is None:
                    node.left = current
                else:
                    left_tail.right = current
                left_tail = current
                current = current.right
            else:
                if right_tail is None:
                    node.right = current
                else:
                    right_tail.left = current
                right_tail = current
                current = current.left

        # Close both spines
        if left_tail is not None:
            left_tail.right = None
        if right_tail is not None:
            right_tail.left = None

    def _delete_key(self, key) -> None:
        # 1) Find the node and its parent
        current = self.root
        previous: Optional[Node] = None
        while current is not None and key != current.key:
            previous = current
            current = current.left if key < current.key else current.right

        if current is None:
            debug_log("delete(%r): key not found", key)
            raise KeyNotFoundError(key)

        left, right = current.left, current.right
        current.left = current.right = None

        # 2) Replacement: the single child, or the higher ranked one (left wins ties)
        if left is None:
            replacement = right
        elif right is None:
            replacement = left
        elif left.rank >= right.rank:
            replacement = left
        else:
            replacement = right

        if previous is None:
            self.root = replacement
        elif key < previous.key:
            previous.left = replacement
        else:
            previous.right = replacement

        self._zip(left, right)

    @staticmethod
    def _zip(left: Optional[Node], right: Optional[Node]) -> None:
        """
        Merge ``left`` (all keys smaller) and ``right`` (all keys larger) in place.

        The higher ranked root is already linked by the caller. The walk
        follows the right spine of ``left`` and the left spine of ``right``,
        switching sides whenever the other frontier outranks the current one.
        """
        previous: Optional[Node] = None
        while left is not None and right is not None:
            if left.rank >= right.rank:
                while left is not None and left.rank >= right.rank:
                    previous = left
                    left = left.right
                previous.right = right
            else:
                while right is not None and left.rank < right.rank:
                    previous = right
                    right = right.left
                previous.left = left

    @staticmethod
    def _path_contains(node: Optional[Node], key) -> bool:
        while node is not None:
            if key == node.key:
                return True
            node = node.left if key < node.key else node.right
        return False
