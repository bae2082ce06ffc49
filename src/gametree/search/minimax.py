from __future__ import annotations

from gametree.errors import (
    EmptyTreeError,
    InvalidTreeSpecification,
    SearchDepthExceeded,
)
from gametree.search.alphabeta import SearchStats
from gametree.tree.node import Node


def minimax(
    node: Node | None,
    maximizing: bool,
    *,
    stats: SearchStats | None = None,
    max_depth: int | None = None,
) -> int:
    """
    Plain minimax without pruning. Visits every node below ``node``; used to
    check that pruning never changes the value.
    """
    if node is None:
        raise EmptyTreeError("Cannot evaluate an empty tree")
    return _minimax(node, maximizing, 0, stats, max_depth)


def _minimax(node, maximizing, depth, stats, max_depth):
    if max_depth is not None and depth > max_depth:
        raise SearchDepthExceeded(max_depth)
    if stats is not None:
        stats.record(node, depth)

    if node.is_leaf():
        return node.value
    if not node.children:
        raise InvalidTreeSpecification("Internal node has no children")

    values = [
        _minimax(child, not maximizing, depth + 1, stats, max_depth)
        for child in node.children
    ]
    return max(values) if maximizing else min(values)
