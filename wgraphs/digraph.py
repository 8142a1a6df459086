"""Directed edge-weighted graphs stored as adjacency lists."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable, Iterator

from wgraphs.graph import _format_weight, _read_edge_list


@dataclass(frozen=True)
class DirectedEdge:
    """A weighted edge from ``source`` to ``target``."""

    source: int
    target: int
    weight: float


class EdgeWeightedDigraph:
    """Directed graph with a fixed number of vertices and weighted edges."""

    def __init__(self, vertices: int, edges: Iterable[DirectedEdge] = ()) -> None:
        if vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self._adj: list[list[DirectedEdge]] = [[] for _ in range(vertices)]
        self._edge_count = 0
        for edge in edges:
            self.add(edge)

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> EdgeWeightedDigraph:
        """Build a digraph from an edge-list file: ``V E`` then ``from to weight`` lines."""
        vertices, declared, triples = _read_edge_list(path)
        graph = cls(vertices)
        for source, target, weight in triples:
            graph.add(DirectedEdge(source, target, weight))
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
        """Return whether ``v`` names a vertex of this digraph."""
        return 0 <= v < self.vertex_count

    def _check_vertex(self, v: int) -> None:
        if not self.is_valid_vertex(v):
            raise IndexError(f"vertex {v} is out of bounds")

    def add(self, edge: DirectedEdge) -> None:
        """Add ``edge`` to the adjacency list of its source."""
        self._check_vertex(edge.source)
        self._check_vertex(edge.target)
        self._adj[edge.source].append(edge)
        self._edge_count += 1

    def adjacent(self, v: int) -> list[DirectedEdge]:
        """Return the edges leaving ``v``."""
        self._check_vertex(v)
        return list(self._adj[v])

    def adjacency(self) -> list[list[DirectedEdge]]:
        """Return a copy of all adjacency lists, indexed by vertex."""
        return [list(outgoing) for outgoing in self._adj]

    def edges(self) -> list[DirectedEdge]:
        """Return every edge, grouped by source vertex."""
        return [edge for outgoing in self._adj for edge in outgoing]

    def remove_edge(self, edge: DirectedEdge) -> bool:
        """Remove all edges from ``edge.source`` to ``edge.target``; report whether any were."""
        self._check_vertex(edge.source)
        self._check_vertex(edge.target)
        outgoing = self._adj[edge.source]
        kept = [e for e in outgoing if e.target != edge.target]
        removed = len(outgoing) - len(kept)
        self._adj[edge.source] = kept
        self._edge_count -= removed
        return removed > 0

    def _lines(self) -> Iterator[str]:
        """Yield one adjacency-list line per vertex."""
        for i, outgoing in enumerate(self._adj):
            yield str(i) + "".join(
                f"  -> {edge.target} [{_format_weight(edge.weight)}]" for edge in outgoing
            )

    def format(self) -> str:
        """Render the digraph as an adjacency list, one vertex per line."""
        return "\n".join(self._lines())

    def print_graph(self) -> None:
        """Print the adjacency list to standard output, one vertex per line."""
        for line in self._lines():
            print(line)