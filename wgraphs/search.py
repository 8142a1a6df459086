"""Depth-first and breadth-first search over undirected weighted graphs."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass

from wgraphs.graph import EdgeWeightedGraph


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a graph search started at ``start``.

    ``marked[v]`` tells whether ``v`` was reached, ``edge_to[v]`` is the vertex
    from which ``v`` was discovered (``-1`` for the start and unreached
    vertices), and ``order`` lists the vertices in the order they were visited.
    """

    start: int
    marked: list[bool]
    edge_to: list[int]
    order: list[int]

    @property
    def connected(self) -> bool:
        """Whether every vertex of the graph was reached."""
        return all(self.marked)


def _check_start(graph: EdgeWeightedGraph, start: int) -> None:
    if not graph.is_valid_vertex(start):
        raise IndexError(f"vertex {start} is out of bounds")


def dfs(graph: EdgeWeightedGraph, start: int) -> SearchResult:
    """Run a depth-first search from ``start``, visiting neighbours in adjacency order."""
    _check_start(graph, start)
    marked = [False] * graph.vertex_count
    edge_to = [-1] * graph.vertex_count
    order: list[int] = []

    marked[start] = True
    order.append(start)
    stack = [(start, iter(graph.adjacent(start)))]
    while stack:
        v, pending = stack[-1]
        for edge in pending:
            w = edge.other(v)
            if not marked[w]:
                edge_to[w] = v
                marked[w] = True
                order.append(w)
                stack.append((w, iter(graph.adjacent(w))))
                break
        else:
            stack.pop()

    return SearchResult(start, marked, edge_to, order)


def bfs(graph: EdgeWeightedGraph, start: int) -> SearchResult:
    """Run a breadth-first search from ``start``, visiting neighbours in adjacency order."""
    _check_start(graph, start)
    marked = [False] * graph.vertex_count
    edge_to = [-1] * graph.vertex_count
    order: list[int] = []

    queue = deque([start])
    while queue:
        v = queue.popleft()
        if marked[v]:
            continue
        marked[v] = True
        order.append(v)
        for edge in graph.adjacent(v):
            w = edge.other(v)
            if not marked[w]:
                if edge_to[w] == -1:
                    edge_to[w] = v
                queue.append(w)

    return SearchResult(start, marked, edge_to, order)