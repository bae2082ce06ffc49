# ================================================================================
# Tree builder
#
# Turns a structural description (internal count, leaf values, child lists)
# into a GameTree. Leaves are built first, then internal nodes in decreasing
# index order, so every child reference points at an already built node and
# the result is acyclic by construction.
#
# Author: Stefan Filges (stefan.filges@pm.me)
# Copyright (c) 2026 Stefan Filges
# ================================================================================

from __future__ import annotations

import json
from pathlib import Path

from loguru import logger
from pydantic import BaseModel, Field, ValidationError, model_validator

from gametree.config import DEFAULT_MAX_NODES
from gametree.errors import InvalidChildReference, InvalidTreeSpecification
from gametree.tree.node import GameTree, Internal, Leaf, Node


# ================================================================================
# Input model
# ================================================================================


class TreeSpec(BaseModel):
    """
    Complete, non-interactive description of a game tree.

    ``children`` maps every internal index to its ordered child indices.
    """

    root_maximizing: bool = True
    internal_count: int = Field(ge=0)
    leaf_values: list[int] = Field(default_factory=list)
    children: dict[int, list[int]] = Field(default_factory=dict)

    @model_validator(mode="after")
    def check_children_cover_internal_nodes(self) -> "TreeSpec":
        missing = [i for i in range(self.internal_count) if i not in self.children]
        if missing:
            raise ValueError(f"No child list given for internal nodes {missing}")
        extra = sorted(i for i in self.children if not 0 <= i < self.internal_count)
        if extra:
            raise ValueError(f"Child lists given for unknown internal nodes {extra}")
        return self

    @property
    def leaf_count(self) -> int:
        return len(self.leaf_values)

    @classmethod
    def from_dict(cls, data: dict) -> "TreeSpec":
        try:
            return cls(**data)
        except ValidationError as e:
            raise InvalidTreeSpecification(f"Invalid tree specification: {e}") from e

    @classmethod
    def from_json_file(cls, path: Path | str) -> "TreeSpec":
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"Tree file not found: {path}")
        with path.open() as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise InvalidTreeSpecification(
                    f"Tree file is not valid JSON: {path}: {e}"
                ) from e
        if not isinstance(data, dict):
            raise InvalidTreeSpecification(f"Tree file must contain a JSON object: {path}")
        logger.info(f"Tree specification loaded from: {path}")
        return cls.from_dict(data)


# ================================================================================
# Incremental builder
# ================================================================================


class TreeBuilder:
    """
    Builds a GameTree one node at a time.

    Usage:
        builder = TreeBuilder(internal_count=2, leaf_count=3)
        builder.add_leaves([3, 5, 2])
        builder.add_internal(1, [3, 4])
        builder.add_internal(0, [1, 2])
        tree = builder.finish(root_maximizing=True)

    ``check_child`` validates a single slot without modifying the builder, so
    an interactive caller can ask again for just that slot.
    """

    def __init__(
        self, internal_count: int, leaf_count: int, max_nodes: int = DEFAULT_MAX_NODES
    ):
        if internal_count < 0 or leaf_count < 0:
            raise InvalidTreeSpecification(
                f"Node counts must not be negative (internal={internal_count}, "
                f"leaf={leaf_count})"
            )
        total = internal_count + leaf_count
        if total == 0:
            raise InvalidTreeSpecification("A tree needs at least one node")
        if internal_count > 0 and leaf_count == 0:
            raise InvalidTreeSpecification(
                f"{internal_count} internal nodes need at least one leaf to refer to"
            )
        if total > max_nodes:
            raise InvalidTreeSpecification(
                f"Tree has {total} nodes, more than the allowed {max_nodes}"
            )

        self.internal_count = internal_count
        self.leaf_count = leaf_count
        self.nodes: list[Node | None] = [None] * total
        self._leaves_added = False
        self._next_internal = internal_count - 1

    @property
    def size(self) -> int:
        return len(self.nodes)

    def pending(self) -> int | None:
        """Index of the next internal node to build, or None when done."""
        if self._next_internal < 0:
            return None
        return self._next_internal

    def add_leaves(self, values: list[int]) -> None:
        if self._leaves_added:
            raise InvalidTreeSpecification("Leaf nodes were already added")
        if len(values) != self.leaf_count:
            raise InvalidTreeSpecification(
                f"Expected {self.leaf_count} leaf values, got {len(values)}"
            )
        for offset, value in enumerate(values):
            index = self.internal_count + offset
            self.nodes[index] = Leaf(int(value))
            logger.debug(f"Leaf node {index} = {value}")
        self._leaves_added = True

    def check_child(self, node: int, slot: int, child: int) -> Node:
        """
        Return the already built node at ``child`` or raise
        InvalidChildReference for this single slot.
        """
        if not 0 <= child < self.size:
            raise InvalidChildReference(
                node, slot, child, InvalidChildReference.OUT_OF_RANGE
            )
        if child == node:
            raise InvalidChildReference(
                node, slot, child, InvalidChildReference.SELF_REFERENCE
            )
        built = self.nodes[child]
        if built is None:
            raise InvalidChildReference(
                node, slot, child, InvalidChildReference.NOT_BUILT
            )
        return built

    def add_internal(self, node: int, children: list[int]) -> Internal:
        if not self._leaves_added:
            raise InvalidTreeSpecification("Leaf nodes must be added first")
        if node != self._next_internal:
            raise InvalidTreeSpecification(
                f"Internal nodes are built from {self.internal_count - 1} down to 0; "
                f"expected node {self._next_internal}, got {node}"
            )
        if not children:
            raise InvalidTreeSpecification(f"Internal node {node} has no children")

        resolved = tuple(
            self.check_child(node, slot, child) for slot, child in enumerate(children)
        )
        internal = Internal(resolved)
        self.nodes[node] = internal
        self._next_internal -= 1
        logger.debug(f"Internal node {node} -> children {list(children)}")
        return internal

    def finish(self, root_maximizing: bool = True) -> GameTree:
        if not self._leaves_added or self.pending() is not None:
            raise InvalidTreeSpecification("Tree construction is not complete")

        tree = GameTree(
            nodes=list(self.nodes),
            root_maximizing=root_maximizing,
            internal_count=self.internal_count,
            leaf_count=self.leaf_count,
        )
        orphans = tree.orphans()
        if orphans:
            logger.warning(f"Nodes {orphans} are not reachable from the root")
        logger.info(
            f"Built tree with {self.internal_count} internal and "
            f"{self.leaf_count} leaf nodes"
        )
        return tree


def build_tree(spec: TreeSpec, max_nodes: int = DEFAULT_MAX_NODES) -> GameTree:
    """
    Build a GameTree from a complete TreeSpec.

    Raises:
        InvalidChildReference: for the first child slot that does not point at
            an already built node.
        InvalidTreeSpecification: for structural problems (counts, empty child
            lists).
    """
    builder = TreeBuilder(spec.internal_count, spec.leaf_count, max_nodes=max_nodes)
    builder.add_leaves(spec.leaf_values)
    for node in range(spec.internal_count - 1, -1, -1):
        builder.add_internal(node, spec.children[node])
    return builder.finish(root_maximizing=spec.root_maximizing)
