# wgraphs

Small, dependency-free edge-weighted graphs for Python:

- `wgraphs.graph`: `EdgeWeightedGraph` and `Edge` for undirected graphs
- `wgraphs.digraph`: `EdgeWeightedDigraph` and `DirectedEdge` for directed graphs
- `wgraphs.search`: `dfs` and `bfs`, returning a `SearchResult`
- `wgraphs.priority_queue`: `PriorityQueue`, a min-priority queue whose
  items carry a separate weight and can be looked up, removed and re-weighted

## Installation

```
pip install .
```

## Graph files

`EdgeWeightedGraph.from_file` and `EdgeWeightedDigraph.from_file` read a
plain whitespace-separated edge list: the number of vertices, the number
of edges, then one `from to weight` triple per edge.

```
4 3
0 1 7.0
1 2 5.0
2 3 9.0
```

Reading stops at the first triple that is not numeric. If the vertex and
edge counts are missing, or the number of edges read does not match the
header, `ValueError` is raised.

## Undirected graphs

```python
from wgraphs.graph import Edge, EdgeWeightedGraph

graph = EdgeWeightedGraph.from_file("graph.txt")
print(graph.vertex_count, graph.edge_count)   # properties

graph.add(Edge(0, 3, 4.0))
for edge in graph.adjacent(0):
    print(edge.either(), edge.other(0), edge.weight)

print(graph.edges())        # every edge once
print(graph.format())       # adjacency list as a string
graph.print_graph()         # the same, printed
```

A graph can also be built directly: `EdgeWeightedGraph(4, [Edge(0, 1, 2.0)])`.
An edge is stored in the adjacency lists of both its endpoints.
`adjacency()` returns a copy of all lists, indexed by vertex.
`remove_edge(edge)` removes every edge joining the same two endpoints and
returns whether any was removed. `Edge.other` raises `ValueError` for a
vertex that is not an endpoint.

A vertex outside `0 .. vertex_count - 1` raises `IndexError` when an edge
is added or removed, or its adjacency list is asked for;
`is_valid_vertex(v)` checks one without raising.

## Directed graphs

```python
from wgraphs.digraph import DirectedEdge, EdgeWeightedDigraph

digraph = EdgeWeightedDigraph.from_file("graph.txt")
digraph.add(DirectedEdge(3, 0, 1.5))
print(digraph.adjacent(3))  # edges leaving vertex 3
print(digraph.edges())      # grouped by source vertex
digraph.remove_edge(DirectedEdge(3, 0, 0.0))   # removes all edges 3 -> 0
digraph.print_graph()
```

`DirectedEdge` has the fields `source`, `target` and `weight`. The
digraph offers the same members as the undirected graph.

## Search

```python
from wgraphs.search import bfs, dfs

result = dfs(graph, 0)
print(result.order)       # vertices in visiting order
print(result.edge_to)     # vertex each one was reached from, -1 if none
print(result.marked)      # which vertices were reached
print(result.connected)   # True if every vertex was reached

result = bfs(graph, 0)
```

Both searches visit neighbours in adjacency-list order and raise
`IndexError` for a start vertex outside the graph.

## Priority queue

```python
from wgraphs.priority_queue import PriorityQueue

queue = PriorityQueue()
queue.push("a", 3.0)
queue.push("b", 1.0)
queue.change("a", 0.5)
print(queue.contains("b"))   # True, also: "b" in queue
print(queue.top())           # "a"
print(queue.pop_top())       # "a"
print(len(queue))            # 1
```

The item with the smallest weight is always at `top()`; equal weights keep
insertion order. `top()` and `pop_top()` raise `IndexError` on an empty
queue. `remove(item)` and `change(item, weight)` return `False` when the
item is not queued.

## What this package does not do

It provides graph storage, loading from edge-list files and the two
searches only. It has no minimum spanning tree or shortest path
algorithms and no command-line program.

## Running the tests

```
pip install ".[test]"
pytest
```