"""Statistics and structural checks for zip-trees."""

from __future__ import annotations

import collections
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Optional

from zip_trees.logging_config import get_logger

if TYPE_CHECKING:
    from zip_trees.base import Node, ZipTreeBase

logger = get_logger(__name__)


@dataclass
class Stats:
    """Aggregated statistics for a zip-tree (or one of its subtrees)."""

    node_count: int
    height: int
    rank: int
    is_heap: bool
    is_search_tree: bool
    least_key: Any | None
    greatest_key: Any | None


def _empty_stats() -> Stats:
    return Stats(
        node_count=0,
        height=-1,
        rank=-1,
        is_heap=True,
        is_search_tree=True,
        least_key=None,
        greatest_key=None,
    )


def tree_stats_(
    t: Optional[ZipTreeBase],
    rank_hist: Optional[Dict[int, int]] = None,
) -> Stats:
    """
    Returns aggregated statistics for a zip-tree in **O(n)** time.

    ``rank`` is the rank of the root (the maximum rank for a valid tree),
    ``height`` counts edges and is ``-1`` for an empty tree. The heap check
    applies the tie rule of the tree's class (``ALLOW_LEFT_TIES``).

    Subtrees are aggregated bottom-up with an explicit stack, so long
    chains do not hit the recursion limit.

    The caller can supply an existing Counter / dict for ``rank_hist``;
    otherwise a fresh Counter is used.
    """
    if rank_hist is None:
        rank_hist = collections.Counter()

    if t is None or t.is_empty():
        return _empty_stats()

    allow_left_ties = type(t).ALLOW_LEFT_TIES
    done: Dict[int, Stats] = {}
    stack = [(t.root, False)]
    while stack:
        node, children_done = stack.pop()
        if children_done:
            left = done.pop(id(node.left)) if node.left is not None else _empty_stats()
            right = done.pop(id(node.right)) if node.right is not None else _empty_stats()
            done[id(node)] = _node_stats(node, left, right, allow_left_ties)
            continue
        rank_hist[node.rank] = rank_hist.get(node.rank, 0) + 1
        stack.append((node, True))
        if node.right is not None:
            stack.append((node.right, False))
        if node.left is not None:
            stack.append((node.left, False))

    return done[id(t.root)]


def _node_stats(node: Node, left: Stats, right: Stats, allow_left_ties: bool) -> Stats:
    """Combine the stats of both subtrees with the checks at ``node`` itself."""
    stats = Stats(
        node_count=1 + left.node_count + right.node_count,
        height=1 + max(left.height, right.height),
        rank=node.rank,
        is_heap=left.is_heap and right.is_heap,
        is_search_tree=left.is_search_tree and right.is_search_tree,
        least_key=left.least_key if node.left is not None else node.key,
        greatest_key=right.greatest_key if node.right is not None else node.key,
    )

    # Heap order, with the tie rule of the variant on the left edge
    if node.left is not None:
        if allow_left_ties:
            left_ok = node.left.rank <= node.rank
        else:
            left_ok = node.left.rank < node.rank
        if not left_ok:
            stats.is_heap = False
    if node.right is not None and node.right.rank > node.rank:
        stats.is_heap = False

    # Search tree order against the extreme keys of both subtrees
    if node.left is not None and not left.greatest_key < node.key:
        stats.is_search_tree = False
    if node.right is not None and not node.key < right.least_key:
        stats.is_search_tree = False

    return stats
