# ================================================================================
# Interactive input for the command-line programs
#
# These functions own the console dialogue only. All validation of the tree
# structure happens in TreeBuilder; an invalid child id is asked again for
# that single slot.
# ================================================================================

from __future__ import annotations

import typer
from loguru import logger

from gametree.config import DEFAULT_MAX_NODES
from gametree.errors import InvalidChildReference
from gametree.graph.bfs import Graph
from gametree.tree.builder import TreeBuilder
from gametree.tree.node import GameTree

INVALID_CHILD_MSG = (
    "Invalid node ID. Please enter a valid node ID that's already defined."
)


def prompt_polarity(text: str) -> bool:
    """Ask for 1 (MAX) or 0 (MIN) until one of them is given."""
    while True:
        answer = typer.prompt(text, type=int)
        if answer in (0, 1):
            return bool(answer)
        typer.echo("Please enter 1 for MAX or 0 for MIN.")


def prompt_child_count(node: int) -> int:
    while True:
        count = typer.prompt("Enter number of children", type=int)
        if count >= 1:
            return count
        typer.echo(f"Internal node {node} needs at least one child.")


def prompt_tree(max_nodes: int = DEFAULT_MAX_NODES) -> GameTree:
    """
    Read a game tree from the console.

    Protocol: root polarity, internal node count, leaf node count, one value
    per leaf, then for each internal node from the highest index down to 0
    its child count and child ids.
    """
    typer.echo("Building the game tree from user input...")

    root_maximizing = prompt_polarity("\nIs the root a MAX (1) or MIN (0) node?")
    internal_count = typer.prompt(
        "Enter the total number of internal nodes (non-leaf nodes)", type=int
    )
    leaf_count = typer.prompt("Enter the total number of leaf nodes", type=int)

    builder = TreeBuilder(internal_count, leaf_count, max_nodes=max_nodes)

    typer.echo("\n--- Creating leaf nodes ---")
    values = [
        typer.prompt(f"Enter value for leaf node {internal_count + i}", type=int)
        for i in range(leaf_count)
    ]
    builder.add_leaves(values)

    typer.echo("\n--- Creating internal nodes ---")
    while (node := builder.pending()) is not None:
        typer.echo(f"For internal node {node}:")
        child_count = prompt_child_count(node)

        children = []
        slot = 0
        while slot < child_count:
            child = typer.prompt(f"Enter child {slot + 1} node ID", type=int)
            try:
                builder.check_child(node, slot, child)
            except InvalidChildReference as e:
                logger.debug(str(e))
                typer.echo(INVALID_CHILD_MSG)
                continue
            children.append(child)
            slot += 1

        builder.add_internal(node, children)

    typer.echo("\nTree construction complete!")
    return builder.finish(root_maximizing=root_maximizing)


def prompt_show_tree() -> bool | None:
    """
    Ask whether the tree should be printed. Returns the MAX/MIN polarity to
    label the printout with, or None if the tree should not be printed.
    """
    if not typer.confirm("\nDo you want to see the tree structure?", default=False):
        return None
    return prompt_polarity("Is the root a MAX node? (1 for yes, 0 for no)")


def _parse_edge(line: str) -> tuple[int, int] | None:
    parts = line.split()
    if len(parts) != 2:
        return None
    try:
        u, v = int(parts[0]), int(parts[1])
    except ValueError:
        return None
    if u < 1 or v < 1:
        return None
    return u, v


def prompt_graph() -> tuple[Graph, int]:
    """Read vertex count, edge count and the edges of an undirected graph."""
    vertex_count = typer.prompt("Enter number of vertices", type=int)
    edge_count = typer.prompt("Enter number of edges", type=int)

    graph = Graph()
    for v in range(1, vertex_count + 1):
        graph.add_vertex(v)

    typer.echo("Enter each edge (two vertices per line):")
    added = 0
    while added < edge_count:
        line = typer.prompt(f"Edge {added + 1}", type=str)
        edge = _parse_edge(line)
        if edge is None:
            typer.echo("Please enter two positive vertex ids separated by a space.")
            continue
        graph.add_edge(*edge)
        added += 1

    return graph, vertex_count
