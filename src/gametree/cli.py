# ================================================================================
# Command-line interface for the game tree and graph traversal programs
#
# Thin wrapper around the builder, the evaluators and the interactive prompts.
#
# Author: Stefan Filges (stefan.filges@pm.me)
# Copyright (c) 2026 Stefan Filges
# ================================================================================

import sys
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from gametree.errors import GameTreeError
from gametree.version import __version__

app = typer.Typer(
    name="gametree",
    help="Evaluate game trees with alpha-beta pruning and traverse graphs.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()

# Stack frames per tree level plus headroom for the CLI itself
_RECURSION_HEADROOM = 200


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"[bold green]gametree[/bold green] version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-V", help="Enable verbose output (DEBUG level)."),
    ] = False,
) -> None:
    """Alpha-beta minimax over user-built game trees, plus breadth-first search."""
    log_level = "DEBUG" if verbose else "INFO"
    logger.add("gametree.log", level=log_level)


def _print_stats(pruned, full=None) -> None:
    table = Table(title="Search statistics")
    table.add_column("")
    table.add_column("Alpha-beta", justify="right")
    if full is not None:
        table.add_column("Full minimax", justify="right")

    rows = [
        ("Nodes visited", "nodes_visited"),
        ("Leaves visited", "leaves"),
        ("Internal nodes visited", "internal"),
        ("Cutoffs", "cutoffs"),
        ("Deepest level", "max_depth_reached"),
    ]
    for label, attr in rows:
        cells = [label, str(getattr(pruned, attr))]
        if full is not None:
            cells.append(str(getattr(full, attr)))
        table.add_row(*cells)
    console.print(table)


@app.command()
def minimax(
    tree_file: Annotated[
        Path | None,
        typer.Option(
            "--tree",
            "-t",
            help="JSON tree description. If omitted, the tree is entered interactively.",
        ),
    ] = None,
    preset: Annotated[
        str,
        typer.Option(
            "--preset",
            "-p",
            help="Configuration preset (default or deep).",
        ),
    ] = "default",
    config_file: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to custom configuration JSON file.",
        ),
    ] = None,
    show_stats: Annotated[
        bool,
        typer.Option("--stats", help="Print how many nodes the search visited."),
    ] = False,
    verify: Annotated[
        bool,
        typer.Option(
            "--verify",
            help="Also run full minimax and check that pruning kept the value.",
        ),
    ] = False,
) -> None:
    """
    Build a game tree and print its minimax value using alpha-beta pruning.

    Example:
        gametree minimax --tree tree.json --stats
    """
    from gametree.config import load_config
    from gametree.search import SearchStats, evaluate_tree
    from gametree.search import minimax as full_minimax
    from gametree.tree import TreeSpec, build_tree, render_tree
    from gametree.utils.prompts import prompt_show_tree, prompt_tree

    try:
        config = load_config(preset=preset, config_path=config_file)
    except (GameTreeError, FileNotFoundError) as e:
        logger.error(str(e))
        console.print(f"[bold red]Error: {escape(str(e))}[/bold red]")
        raise typer.Exit(code=1) from e

    sys.setrecursionlimit(
        max(sys.getrecursionlimit(), config.max_depth + _RECURSION_HEADROOM)
    )

    try:
        if tree_file is not None:
            spec = TreeSpec.from_json_file(tree_file)
            tree = build_tree(spec, max_nodes=config.max_nodes)
            show_as = spec.root_maximizing if config.print_tree else None
        else:
            console.print("Alpha-Beta Pruning Algorithm")
            console.print("===========================")
            tree = prompt_tree(max_nodes=config.max_nodes)
            if config.print_tree is None:
                show_as = prompt_show_tree()
            elif config.print_tree:
                show_as = tree.root_maximizing
            else:
                show_as = None

        if show_as is not None:
            console.print("\nTree Structure:")
            console.print("==============")
            console.print(render_tree(tree.root, show_as))

        stats = SearchStats()
        result = evaluate_tree(tree, stats=stats, max_depth=config.max_depth)
        logger.info(
            f"Alpha-beta value {result} after visiting {stats.nodes_visited} nodes"
        )
        console.print(f"\nResult of Alpha-Beta Pruning: {result}")

        full_stats = None
        if verify:
            full_stats = SearchStats()
            expected = full_minimax(
                tree.root,
                tree.root_maximizing,
                stats=full_stats,
                max_depth=config.max_depth,
            )
            if expected == result:
                saved = full_stats.nodes_visited - stats.nodes_visited
                console.print(
                    f"[bold green]Verified[/bold green] against full minimax "
                    f"({saved} node visits saved)"
                )
            else:
                console.print(
                    f"[bold red]Mismatch: full minimax gives {expected}[/bold red]"
                )
                raise typer.Exit(code=1)

        if show_stats or verify:
            _print_stats(stats, full_stats)

        tree.teardown()

    except FileNotFoundError as e:
        console.print(f"[bold red]Error: {escape(str(e))}[/bold red]")
        raise typer.Exit(code=1) from e
    except GameTreeError as e:
        logger.error(str(e))
        console.print(f"[bold red]Error: {escape(str(e))}[/bold red]")
        raise typer.Exit(code=1) from e


@app.command()
def bfs() -> None:
    """Read an undirected graph and print its breadth-first traversal."""
    from gametree.graph import traverse_all
    from gametree.utils.prompts import prompt_graph

    try:
        graph, vertex_count = prompt_graph()
    except GameTreeError as e:
        logger.error(str(e))
        console.print(f"[bold red]Error: {escape(str(e))}[/bold red]")
        raise typer.Exit(code=1) from e

    components = traverse_all(graph, vertex_count)
    order = [str(v) for component in components for v in component]
    console.print(f"BFS traversal: {' '.join(order)}")


if __name__ == "__main__":
    app()
