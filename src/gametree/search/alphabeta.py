# ================================================================================
# Minimax search with alpha-beta pruning
#
# Alpha is the value the maximizing player is already guaranteed, beta the
# value the minimizing player is already guaranteed. As soon as beta <= alpha
# the remaining siblings cannot change the result and are skipped. Ties cut
# off as well.
#
# Author: Stefan Filges (stefan.filges@pm.me)
# Copyright (c) 2026 Stefan Filges
# ================================================================================

from __future__ import annotations

from dataclasses import dataclass, field

from loguru import logger

from gametree.errors import (
    EmptyTreeError,
    InvalidTreeSpecification,
    SearchDepthExceeded,
)
from gametree.tree.node import GameTree, Node

NEG_INF = float("-inf")
POS_INF = float("inf")


@dataclass
class SearchStats:
    """Counts what a search actually touched."""

    visited: list = field(default_factory=list)  # nodes in visit order
    leaves: int = 0
    internal: int = 0
    cutoffs: int = 0
    max_depth_reached: int = 0

    @property
    def nodes_visited(self) -> int:
        return self.leaves + self.internal

    def record(self, node: Node, depth: int) -> None:
        self.visited.append(node)
        if node.is_leaf():
            self.leaves += 1
        else:
            self.internal += 1
        self.max_depth_reached = max(self.max_depth_reached, depth)

    def was_visited(self, node: Node) -> bool:
        return any(seen is node for seen in self.visited)


def evaluate(
    node: Node | None,
    maximizing: bool,
    alpha: float = NEG_INF,
    beta: float = POS_INF,
    *,
    stats: SearchStats | None = None,
    max_depth: int | None = None,
) -> int:
    """
    Return the minimax value of ``node`` with alpha-beta pruning.

    Args:
        node: Root of the (sub)tree to evaluate.
        maximizing: True if the player to move at ``node`` maximizes.
        alpha: Lower bound already guaranteed to the maximizer.
        beta: Upper bound already guaranteed to the minimizer.
        stats: Optional SearchStats filled with every visited node.
        max_depth: Optional recursion bound; deeper trees raise
            SearchDepthExceeded.
    """
    if node is None:
        raise EmptyTreeError("Cannot evaluate an empty tree")
    return _alphabeta(node, maximizing, alpha, beta, 0, stats, max_depth)


def _alphabeta(node, maximizing, alpha, beta, depth, stats, max_depth):
    if max_depth is not None and depth > max_depth:
        raise SearchDepthExceeded(max_depth)
    if stats is not None:
        stats.record(node, depth)

    if node.is_leaf():
        return node.value
    if not node.children:
        raise InvalidTreeSpecification("Internal node has no children")

    if maximizing:
        best = NEG_INF
        for child in node.children:
            val = _alphabeta(child, False, alpha, beta, depth + 1, stats, max_depth)
            best = max(best, val)
            alpha = max(alpha, best)
            if beta <= alpha:
                # Beta cutoff
                _record_cutoff(stats, depth, alpha, beta)
                break
        return best
    else:
        best = POS_INF
        for child in node.children:
            val = _alphabeta(child, True, alpha, beta, depth + 1, stats, max_depth)
            best = min(best, val)
            beta = min(beta, best)
            if beta <= alpha:
                # Alpha cutoff
                _record_cutoff(stats, depth, alpha, beta)
                break
        return best


def _record_cutoff(stats, depth, alpha, beta):
    if stats is not None:
        stats.cutoffs += 1
    logger.debug(f"Cutoff at depth {depth} (alpha={alpha}, beta={beta})")


def evaluate_tree(
    tree: GameTree,
    stats: SearchStats | None = None,
    max_depth: int | None = None,
) -> int:
    """Evaluate a built GameTree from its root with the stored root polarity."""
    return evaluate(
        tree.root,
        tree.root_maximizing,
        stats=stats,
        max_depth=max_depth,
    )
