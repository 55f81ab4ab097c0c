"""Shared node type and ordered-set contract for all zip-tree variants."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Iterator, Optional, Tuple

from zip_trees.errors import EmptyTreeError, KeyNotFoundError
from zip_trees.logging_config import get_logger
from zip_trees.rank_utils import RankSampler

logger = get_logger(__name__)


class Node:
    """A zip-tree node. ``key`` and ``rank`` never change after creation."""

    __slots__ = ("key", "rank", "left", "right")

    def __init__(self, key, rank: int):
        self.key = key
        self.rank = rank
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None

    def __repr__(self) -> str:
        return f"Node(key={self.key!r}, rank={self.rank})"


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a single lookup: whether the key exists and how many keys were compared."""
    __slots__ = ("found", "comparisons")

    found: bool
    comparisons: int


class ZipTreeBase(ABC):
    """
    Common contract shared by the iterative, recursive, optimized and
    instrumented zip-trees.

    Subclasses only provide the structural part of ``insert`` and ``delete``;
    searching, measuring and traversal are identical for every variant.

    Attributes:
        root (Optional[Node]): The root node, ``None`` for an empty tree.
        sampler (RankSampler): Source of ranks for inserts without an explicit rank.
        comparisons (int): Key comparisons performed by the most recent ``search``.
    """
    __slots__ = ("root", "sampler", "comparisons", "_size")

    # Whether a left child may carry the same rank as its parent.
    ALLOW_LEFT_TIES: bool = False

    def __init__(self, sampler: Optional[RankSampler] = None):
        self.root: Optional[Node] = None
        self.sampler = sampler if sampler is not None else RankSampler()
        self.comparisons = 0
        self._size = 0

    def is_empty(self) -> bool:
        return self.root is None

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key) -> bool:
        return self._find(key) is not None

    def __iter__(self) -> Iterator[Any]:
        """Yield all keys in ascending order."""
        stack = []
        cur = self.root
        while stack or cur is not None:
            while cur is not None:
                stack.append(cur)
                cur = cur.left
            cur = stack.pop()
            yield cur.key
            cur = cur.right

    def __str__(self):
        return f"Empty {type(self).__name__}" if self.is_empty() else f"{type(self).__name__}(root={self.root}, size={self._size})"

    __repr__ = __str__

    # Public API
    def insert(self, key, rank: Optional[int] = None) -> Node:
        """
        Insert ``key`` with the given rank, or with a freshly sampled one.

        Args:
            key: The key to insert. Must not be present yet.
            rank (Optional[int]): A non-negative rank. Sampled from ``self.sampler`` if omitted.

        Returns:
            Node: The newly created node.

        Raises:
            DuplicateKeyError: If ``key`` is already in the tree. The tree is left unchanged.
            TypeError: If ``rank`` is not an int.
            ValueError: If ``rank`` is negative.
        """
        if rank is None:
            rank = self.sampler.sample()
        elif not isinstance(rank, int) or isinstance(rank, bool):
            raise TypeError(f"insert(): rank must be an int, got {type(rank).__name__}")
        elif rank < 0:
            raise ValueError(f"insert(): rank must be >= 0, got {rank}")

        node = Node(key, rank)
        self._insert_node(node)
        self._size += 1
        return node

    def delete(self, key) -> None:
        """
        Remove ``key`` from the tree.

        Raises:
            EmptyTreeError: If the tree has no nodes.
            KeyNotFoundError: If ``key`` is not in the tree. The tree is left unchanged.
        """
        if self.root is None:
            logger.debug("delete(%r) on empty %s", key, type(self).__name__)
            raise EmptyTreeError(key, "delete")
        self._delete_key(key)
        self._size -= 1

    def search(self, key) -> bool:
        """Return whether ``key`` is stored; the comparison count is kept in ``self.comparisons``."""
        result = self.lookup(key)
        self.comparisons = result.comparisons
        return result.found

    def lookup(self, key) -> SearchResult:
        """Plain BST descent; every visited node counts as one comparison."""
        cur = self.root
        comparisons = 0
        while cur is not None:
            comparisons += 1
            if key == cur.key:
                return SearchResult(True, comparisons)
            cur = cur.left if key < cur.key else cur.right
        return SearchResult(False, comparisons)

    def depth(self) -> int:
        """Number of edges on the longest root-to-leaf path, ``-1`` for an empty tree."""
        if self.root is None:
            return -1
        max_depth = 0
        stack = [(self.root, 0)]
        while stack:
            node, d = stack.pop()
            if d > max_depth:
                max_depth = d
            if node.left is not None:
                stack.append((node.left, d + 1))
            if node.right is not None:
                stack.append((node.right, d + 1))
        return max_depth

    def key_depth(self, key) -> int:
        """
        Number of edges between the root and the node holding ``key``.

        Raises:
            EmptyTreeError: If the tree has no nodes.
            KeyNotFoundError: If ``key`` is not in the tree.
        """
        if self.root is None:
            raise EmptyTreeError(key, "key_depth")
        cur = self.root
        d = 0
        while cur is not None:
            if key == cur.key:
                return d
            cur = cur.left if key < cur.key else cur.right
            d += 1
        raise KeyNotFoundError(key)

    def rank_of(self, key) -> int:
        """Return the rank stored for ``key``."""
        if self.root is None:
            raise EmptyTreeError(key, "rank_of")
        node = self._find(key)
        if node is None:
            raise KeyNotFoundError(key)
        return node.rank

    def snapshot(self) -> Optional[Tuple]:
        """Nested ``(key, rank, left, right)`` tuples describing the exact shape of the tree."""
        if self.root is None:
            return None

        # Post-order with an explicit stack; chains may be longer than the recursion limit
        frozen = {}
        stack = [(self.root, False)]
        while stack:
            node, children_done = stack.pop()
            if children_done:
                frozen[id(node)] = (
                    node.key,
                    node.rank,
                    frozen.pop(id(node.left)) if node.left is not None else None,
                    frozen.pop(id(node.right)) if node.right is not None else None,
                )
                continue
            stack.append((node, True))
            if node.right is not None:
                stack.append((node.right, False))
            if node.left is not None:
                stack.append((node.left, False))
        return frozen[id(self.root)]

    def print_structure(self) -> str:
        from zip_trees.display import print_pretty
        return print_pretty(self)

    # Private Methods
    def _find(self, key) -> Optional[Node]:
        cur = self.root
        while cur is not None:
            if key == cur.key:
                return cur
            cur = cur.left if key < cur.key else cur.right
        return None

    @abstractmethod
    def _insert_node(self, node: Node) -> None:
        """Link a fresh node into the tree, raising DuplicateKeyError before any mutation."""

    @abstractmethod
    def _delete_key(self, key) -> None:
        """Unlink the node holding ``key`` from a non-empty tree, raising KeyNotFoundError before any mutation."""


def debug_log(message, *args, **kwargs):
    """Log a debug message only if debug logging is enabled"""
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(message, *args, **kwargs)
