"""Edge-weighted graphs and digraphs, depth- and breadth-first search, and a weighted priority queue."""

__version__ = "0.1.0"

__all__ = ["priority_queue", "graph", "digraph", "search"]