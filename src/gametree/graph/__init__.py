from gametree.graph.bfs import Graph, bfs, traverse_all

__all__ = ["Graph", "bfs", "traverse_all"]
