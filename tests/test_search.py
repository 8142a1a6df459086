import pytest

from wgraphs.graph import Edge, EdgeWeightedGraph
from wgraphs.search import bfs, dfs

GRAPH1_TEXT = """7 11
0 1 7
0 3 5
1 2 8
1 3 9
1 4 7
2 4 5
3 4 15
3 5 6
4 5 8
4 6 9
5 6 11
"""


@pytest.fixture
def graph1(tmp_path):
    path = tmp_path / "graph1.txt"
    path.write_text(GRAPH1_TEXT)
    return EdgeWeightedGraph.from_file(path)


@pytest.fixture
def split_graph():
    # Vertices {0, 4, 18} form their own component among 20 vertices.
    edges = [Edge(0, 4, 47.0), Edge(4, 18, 3.0), Edge(18, 0, 12.0)]
    rest = [v for v in range(20) if v not in (0, 4, 18)]
    edges += [Edge(a, b, 1.0) for a, b in zip(rest, rest[1:])]
    return EdgeWeightedGraph(20, edges)


def _depth(result, v):
    steps = 0
    while v != result.start:
        v = result.edge_to[v]
        steps += 1
    return steps


@pytest.mark.parametrize("search", [dfs, bfs])
def test_graph1_connected_from_every_vertex(graph1, search):
    for start in range(graph1.vertex_count):
        result = search(graph1, start)
        assert result.connected is True
        assert len(result.marked) == graph1.vertex_count
        assert len(result.edge_to) == graph1.vertex_count


def test_dfs_edge_to_graph1(graph1):
    result = dfs(graph1, 0)
    assert result.edge_to == [-1, 0, 1, 4, 2, 3, 5]


def test_bfs_edge_to_graph1(graph1):
    result = bfs(graph1, 0)
    assert result.edge_to == [-1, 0, 1, 0, 1, 3, 4]


@pytest.mark.parametrize("search", [dfs, bfs])
def test_split_graph_components(split_graph, search):
    for start in range(split_graph.vertex_count):
        result = search(split_graph, start)
        assert result.connected is False
        assert len(result.marked) == split_graph.vertex_count
        in_component = start in (0, 4, 18)
        assert result.marked[0] is in_component
        assert result.marked[4] is in_component
        assert result.marked[18] is in_component


@pytest.mark.parametrize("search", [dfs, bfs])
def test_order_matches_marked(graph1, split_graph, search):
    for graph in (graph1, split_graph):
        for start in range(graph.vertex_count):
            result = search(graph, start)
            assert result.order[0] == start
            assert len(set(result.order)) == len(result.order)
            assert set(result.order) == {v for v, m in enumerate(result.marked) if m}


@pytest.mark.parametrize("search", [dfs, bfs])
def test_edge_to_leads_back_to_start_along_edges(graph1, search):
    for start in range(graph1.vertex_count):
        result = search(graph1, start)
        assert result.edge_to[start] == -1
        for v in range(graph1.vertex_count):
            if v == start:
                continue
            parent = result.edge_to[v]
            assert any(e.other(v) == parent for e in graph1.adjacent(v))
            assert _depth(result, v) < graph1.vertex_count


def test_dfs_and_bfs_reach_same_vertices(split_graph):
    for start in range(split_graph.vertex_count):
        assert dfs(split_graph, start).marked == bfs(split_graph, start).marked


def test_bfs_visits_in_nondecreasing_depth(graph1):
    for start in range(graph1.vertex_count):
        result = bfs(graph1, start)
        depths = [_depth(result, v) for v in result.order]
        assert depths == sorted(depths)


def test_unreached_vertices_have_no_parent(split_graph):
    result = dfs(split_graph, 0)
    for v, reached in enumerate(result.marked):
        if not reached:
            assert result.edge_to[v] == -1


def test_single_vertex_graph():
    graph = EdgeWeightedGraph(1)
    for search in (dfs, bfs):
        result = search(graph, 0)
        assert result.connected is True
        assert result.order == [0]
        assert result.edge_to == [-1]


@pytest.mark.parametrize("search", [dfs, bfs])
@pytest.mark.parametrize("start", [-1, 7])
def test_invalid_start_raises(graph1, search, start):
    with pytest.raises(IndexError):
        search(graph1, start)