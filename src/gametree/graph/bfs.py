# ================================================================================
# Breadth-first traversal of an undirected graph
#
# Breadth-first search visits every vertex at distance k from the start
# before any vertex at distance k + 1, using a first-in-first-out queue.
# Vertices are marked when they are enqueued so each one is queued once.
#
# Author: Stefan Filges (stefan.filges@pm.me)
# Copyright (c) 2026 Stefan Filges
# ================================================================================

from __future__ import annotations

from collections import defaultdict, deque

from loguru import logger

from gametree.errors import InvalidEdge


class Graph:
    """Undirected graph stored as a mapping from vertex id to adjacency list."""

    def __init__(self):
        self.adjacency: defaultdict[int, list[int]] = defaultdict(list)

    def __repr__(self):
        edges = sum(len(v) for v in self.adjacency.values()) // 2
        return f"Graph({len(self.adjacency)} vertices, {edges} edges)"

    @staticmethod
    def _check_vertex(v) -> int:
        if isinstance(v, bool) or not isinstance(v, int) or v < 1:
            raise InvalidEdge(f"Vertex ids must be positive integers, got {v!r}")
        return v

    def add_vertex(self, v: int) -> None:
        self.adjacency[self._check_vertex(v)]

    def add_edge(self, u: int, v: int) -> None:
        u = self._check_vertex(u)
        v = self._check_vertex(v)
        self.adjacency[u].append(v)
        self.adjacency[v].append(u)

    def vertices(self) -> list[int]:
        return sorted(self.adjacency)

    def neighbors(self, v: int) -> list[int]:
        return list(self.adjacency.get(v, []))

    @classmethod
    def from_edges(cls, edges) -> "Graph":
        graph = cls()
        for u, v in edges:
            graph.add_edge(u, v)
        return graph


def bfs(graph: Graph, start: int, visited: set[int] | None = None) -> list[int]:
    """
    Return the vertices reachable from ``start`` in breadth-first order.

    Args:
        graph: Graph to traverse.
        start: Starting vertex.
        visited: Optional set shared between calls; vertices already in it are
            skipped and newly visited vertices are added.
    """
    if visited is None:
        visited = set()
    if start in visited:
        return []

    order = []
    queue = deque([start])
    visited.add(start)

    while queue:
        v = queue.popleft()
        order.append(v)
        for child in graph.adjacency.get(v, []):
            if child not in visited:
                queue.append(child)
                visited.add(child)

    return order


def traverse_all(graph: Graph, vertex_count: int) -> list[list[int]]:
    """
    Run BFS from every not yet visited vertex 1..vertex_count, in increasing
    order. Returns one visit order per connected component.
    """
    visited: set[int] = set()
    components = []
    for v in range(1, vertex_count + 1):
        if v not in visited:
            components.append(bfs(graph, v, visited))
    logger.debug(f"BFS found {len(components)} components in {graph!r}")
    return components
