from gametree.tree.builder import TreeBuilder, TreeSpec, build_tree
from gametree.tree.display import render_tree
from gametree.tree.node import GameTree, Internal, Leaf, Node

__all__ = [
    "GameTree",
    "Internal",
    "Leaf",
    "Node",
    "TreeBuilder",
    "TreeSpec",
    "build_tree",
    "render_tree",
]
