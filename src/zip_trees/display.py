"""Pretty-printing utilities for zip-tree structures."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from zip_trees.base import Node, ZipTreeBase


def print_pretty(tree: Optional[ZipTreeBase]) -> str:
    """
    Render a zip-tree as an indented listing:
      • One line per node, showing its key and rank.
      • Children are listed below their parent, left child first,
        prefixed with ``L:`` or ``R:``.
      • A missing child next to an existing one is shown as ``·``.
    """
    from zip_trees.base import ZipTreeBase

    if tree is None:
        return f"{type(tree).__name__}: None"

    if not isinstance(tree, ZipTreeBase):
        raise TypeError(f"print_pretty() expects ZipTreeBase, got {type(tree).__name__}")

    if tree.is_empty():
        return f"{type(tree).__name__}: Empty"

    lines = [f"{type(tree).__name__} (size={len(tree)}, depth={tree.depth()})"]
    stack = [(tree.root, "", "", True)]

    while stack:
        node, prefix, label, is_last = stack.pop()
        connector = "" if not label else ("└── " if is_last else "├── ")
        if node is None:
            lines.append(f"{prefix}{connector}{label}·")
            continue
        lines.append(f"{prefix}{connector}{label}{_format_node(node)}")

        if node.left is None and node.right is None:
            continue
        child_prefix = prefix + ("" if not label else ("    " if is_last else "│   "))
        # push right first so the left child is printed first
        stack.append((node.right, child_prefix, "R: ", True))
        stack.append((node.left, child_prefix, "L: ", False))

    return "\n".join(lines)


def _format_node(node: Node) -> str:
    return f"{node.key} (r{node.rank})"


def level_keys(tree: ZipTreeBase) -> List[List]:
    """Keys grouped by depth, left to right within each level."""
    levels: List[List] = []
    frontier = [tree.root] if tree.root is not None else []
    while frontier:
        levels.append([n.key for n in frontier])
        frontier = [c for n in frontier for c in (n.left, n.right) if c is not None]
    return levels
