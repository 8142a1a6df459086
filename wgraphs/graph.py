"""Undirected edge-weighted graphs stored as adjacency lists."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator


@dataclass(frozen=True)
class Edge:
    """An undirected weighted edge between vertices ``v`` and ``w``."""

    v: int
    w: int
    weight: float

    def either(self) -> int:
        """Return one endpoint of the edge."""
        return self.v

    def other(self, vertex: int) -> int:
        """Return the endpoint opposite ``vertex``."""
        if vertex == self.v:
            return self.w
        if vertex == self.w:
            return self.v
        raise ValueError(f"vertex {vertex} is not an endpoint of {self}")


def _read_edge_list(
    path: str | os.PathLike[str],
) -> tuple[int, int, list[tuple[int, int, float]]]:
    """Read a vertex count, a declared edge count and ``v w weight`` triples."""
    tokens = Path(path).read_text().split()
    try:
        vertices, declared = int(tokens[0]), int(tokens[1])
    except (IndexError, ValueError) as exc:
        raise ValueError(f"{path}: missing vertex and edge counts") from exc
    triples: list[tuple[int, int, float]] = []
    rest = iter(tokens[2:])
    for v, w, weight in zip(rest, rest, rest):
        try:
            triples.append((int(v), int(w), float(weight)))
        except ValueError:
            break
    return vertices, declared, triples


def _format_weight(weight: float) -> str:
    return f"{weight:g}"


class EdgeWeightedGraph:
    """Undirected graph with a fixed number of vertices and weighted edges."""

    def __init__(self, vertices: int, edges: Iterable[Edge] = ()) -> None:
        if vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self._adj: list[list[Edge]] = [[] for _ in range(vertices)]
        self._edge_count = 0
        for edge in edges:
            self.add(edge)

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> EdgeWeightedGraph:
        """Build a graph from an edge-list file: ``V E`` then ``v w weight`` lines."""
        vertices, declared, triples = _read_edge_list(path)
        graph = cls(vertices)
        for v, w, weight in triples:
            graph.add(Edge(v, w, weight))
        if graph.edge_count != declared:
            raise ValueError(
                f"{path}: missing edges, expected {declared}, read {graph.edge_count}"
            )
        return graph

    @property
    def vertex_count(self) -> int:
        """Number of vertices."""
        return len(self._adj)

    @property
    def edge_count(self) -> int:
        """Number of edges."""
        return self._edge_count

    def is_valid_vertex(self, v: int) -> bool:
        """Return whether ``v`` names a vertex of this graph."""
        return 0 <= v < self.vertex_count

    def _check_vertex(self, v: int) -> None:
        if not self.is_valid_vertex(v):
            raise IndexError(f"vertex {v} is out of bounds")

    def add(self, edge: Edge) -> None:
        """Add ``edge`` to the adjacency lists of both endpoints."""
        v = edge.either()
        w = edge.other(v)
        self._check_vertex(v)
        self._check_vertex(w)
        self._adj[v].append(edge)
        self._adj[w].append(edge)
        self._edge_count += 1

    def adjacent(self, v: int) -> list[Edge]:
        """Return the edges incident to ``v``."""
        self._check_vertex(v)
        return list(self._adj[v])

    def adjacency(self) -> list[list[Edge]]:
        """Return a copy of all adjacency lists, indexed by vertex."""
        return [list(incident) for incident in self._adj]

    def edges(self) -> list[Edge]:
        """Return every edge once."""
        result: list[Edge] = []
        for v, incident in enumerate(self._adj):
            self_loops = 0
            for edge in incident:
                other = edge.other(v)
                if other > v:
                    result.append(edge)
                elif other == v:
                    # A self loop sits twice, consecutively, in its list.
                    if self_loops % 2 == 0:
                        result.append(edge)
                    self_loops += 1
        return result

    def remove_edge(self, edge: Edge) -> bool:
        """Remove all edges joining the endpoints of ``edge``; report whether any were."""
        a = edge.either()
        b = edge.other(a)
        self._check_vertex(a)
        self._check_vertex(b)
        endpoints = {a, b}

        def joins(candidate: Edge) -> bool:
            return {candidate.v, candidate.w} == endpoints

        before = len(self._adj[a])
        self._adj[a] = [e for e in self._adj[a] if not joins(e)]
        removed = before - len(self._adj[a])
        if a != b:
            self._adj[b] = [e for e in self._adj[b] if not joins(e)]
        else:
            removed //= 2
        self._edge_count -= removed
        return removed > 0

    def _lines(self) -> Iterator[str]:
        """Yield one adjacency-list line per vertex."""
        for i, incident in enumerate(self._adj):
            parts = [str(i)]
            for edge in incident:
                if edge.either() == i:
                    parts.append(f"  -> {edge.other(i)} [{_format_weight(edge.weight)}]")
            yield "".join(parts)

    def format(self) -> str:
        """Render the graph as an adjacency list, one vertex per line."""
        return "\n".join(self._lines())

    def print_graph(self) -> None:
        """Print the adjacency list to standard output, one vertex per line."""
        for line in self._lines():
            print(line)