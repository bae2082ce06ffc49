from __future__ import annotations

from rich.tree import Tree

from gametree.tree.node import Node


def _label(node: Node, is_max: bool) -> str:
    if node.is_leaf():
        return f"Leaf: {node.value}"
    kind = "MAX" if is_max else "MIN"
    return f"[bold]{kind}[/bold] Node with {len(node.children)} children"


def render_tree(root: Node, root_is_max: bool = True) -> Tree:
    """
    Build a rich Tree for printing. Shared children are printed under every
    parent; polarity labels alternate with depth starting at ``root_is_max``.
    """
    tree = Tree(_label(root, root_is_max))
    stack = [(root, tree, root_is_max)]
    while stack:
        node, branch, is_max = stack.pop()
        if node.is_leaf():
            continue
        for child in node.children:
            child_branch = branch.add(_label(child, not is_max))
            stack.append((child, child_branch, not is_max))
    return tree
