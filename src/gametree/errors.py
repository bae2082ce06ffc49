# ================================================================================
# Exception types shared by the tree builder, evaluators and graph traversal
#
# Author: Stefan Filges (stefan.filges@pm.me)
# Copyright (c) 2026 Stefan Filges
# ================================================================================

from __future__ import annotations


class GameTreeError(Exception):
    """Base class for all gametree errors."""


class InvalidTreeSpecification(GameTreeError, ValueError):
    """The structural description of a tree cannot be built (fatal)."""


class ConfigError(GameTreeError, ValueError):
    """Unknown preset or invalid search parameters."""


class InvalidChildReference(GameTreeError):
    """
    A child id supplied for one slot of an internal node does not point at a
    node that already exists.

    Recoverable: only the offending slot has to be supplied again.

    Attributes:
        node: Index of the internal node being built.
        slot: 0-based position in that node's child list.
        child: The rejected child index.
        reason: One of ``OUT_OF_RANGE``, ``SELF_REFERENCE`` or ``NOT_BUILT``.
    """

    OUT_OF_RANGE = "out of range"
    SELF_REFERENCE = "self reference"
    NOT_BUILT = "not yet built"

    def __init__(self, node: int, slot: int, child: int, reason: str):
        self.node = node
        self.slot = slot
        self.child = child
        self.reason = reason
        super().__init__(
            f"Invalid child {child} for internal node {node} "
            f"(slot {slot + 1}): {reason}"
        )


class NodeKindError(GameTreeError, AttributeError):
    """Leaf-only or internal-only accessor used on the wrong kind of node."""


class EmptyTreeError(GameTreeError):
    """Evaluation was requested without a root node."""


class SearchDepthExceeded(GameTreeError):
    """The tree is deeper than the configured ``max_depth``."""

    def __init__(self, max_depth: int):
        self.max_depth = max_depth
        super().__init__(f"Tree depth exceeds the configured limit of {max_depth}")


class InvalidEdge(GameTreeError, ValueError):
    """An edge references a vertex id that is not a positive integer."""
