# ================================================================================
# Game tree nodes and the arena that owns them
#
# A node is either a Leaf holding a terminal utility or an Internal node
# holding an ordered tuple of children. Children may be shared between
# parents, so a built tree is a DAG; nodes compare by identity.
#
# Author: Stefan Filges (stefan.filges@pm.me)
# Copyright (c) 2026 Stefan Filges
# ================================================================================

from __future__ import annotations

from dataclasses import dataclass, field

from loguru import logger

from gametree.errors import EmptyTreeError, NodeKindError


class Node:
    """Common interface of Leaf and Internal."""

    __slots__ = ()

    def is_leaf(self) -> bool:
        raise NotImplementedError


@dataclass(frozen=True, eq=False)
class Leaf(Node):
    """Terminal node with a signed integer utility."""

    value: int

    def is_leaf(self) -> bool:
        return True

    @property
    def children(self) -> tuple[Node, ...]:
        raise NodeKindError("Leaf nodes have no children")

    def __repr__(self):
        return f"Leaf({self.value})"


@dataclass(frozen=True, eq=False)
class Internal(Node):
    """Non-terminal node. Polarity is not stored; it alternates with depth."""

    children: tuple[Node, ...]

    def is_leaf(self) -> bool:
        return False

    @property
    def value(self) -> int:
        raise NodeKindError("Internal nodes have no value")

    def __repr__(self):
        return f"Internal({len(self.children)} children)"


# ================================================================================
# Arena
# ================================================================================


@dataclass
class GameTree:
    """
    Owns every node built for one build-evaluate-teardown cycle.

    Args:
        - nodes: built nodes by index; indices [0, internal_count) are internal
          nodes and [internal_count, internal_count + leaf_count) are leaves
        - root_maximizing: polarity of the root (True for MAX)
        - internal_count
        - leaf_count
    """

    nodes: list[Node]
    root_maximizing: bool = True
    internal_count: int = 0
    leaf_count: int = 0
    released: bool = field(default=False, init=False)

    @property
    def root(self) -> Node:
        if self.released or not self.nodes:
            raise EmptyTreeError("The tree has no root node")
        return self.nodes[0]

    def __len__(self):
        return len(self.nodes)

    def reachable_nodes(self) -> list[Node]:
        """Distinct nodes reachable from the root in pre-order, each exactly once."""
        seen: set[int] = set()
        order: list[Node] = []
        stack = [self.root]
        while stack:
            node = stack.pop()
            if id(node) in seen:
                continue
            seen.add(id(node))
            order.append(node)
            if not node.is_leaf():
                # Reversed so the first child is visited first
                stack.extend(reversed(node.children))
        return order

    def orphans(self) -> list[int]:
        """Indices of built nodes that cannot be reached from the root."""
        reachable = {id(node) for node in self.reachable_nodes()}
        return [i for i, node in enumerate(self.nodes) if id(node) not in reachable]

    def teardown(self) -> int:
        """
        Release every distinct node exactly once and empty the arena.

        Reachable nodes are walked from the root with identity deduplication,
        so shared children are released once no matter how many parents refer
        to them; orphans are released after them. Returns the number of
        released nodes.
        """
        if self.released or not self.nodes:
            self.released = True
            return 0

        released = self.reachable_nodes()
        released.extend(self.nodes[i] for i in self.orphans())

        count = len(released)
        self.nodes = []
        self.released = True
        logger.debug(f"Released {count} nodes")
        return count
