import pytest

from dsalgo.graph import AdjacencyList, bfs_from, dfs_from

EDGES = [(0, 1), (0, 4), (1, 2), (2, 0), (3, 5), (4, 2), (5, 6)]
SIZE = 8


@pytest.fixture
def graph():
    g = AdjacencyList(SIZE)
    for vertex, target in EDGES:
        g.add_edge(vertex, target)
    return g


def test_str_format():
    g = AdjacencyList(2)
    g.add_edge(0, 1)
    assert str(g) == "V(0) { [1] -> NULL }\nV(1) { NULL }"


def test_getitem_keeps_insertion_order(graph):
    assert graph[0] == tuple(t for v, t in EDGES if v == 0)
    assert len(graph) == SIZE


def test_add_edge_out_of_range():
    g = AdjacencyList(3)
    with pytest.raises(IndexError):
        g.add_edge(0, 3)
    with pytest.raises(IndexError):
        g.add_edge(-1, 0)


def test_negative_size():
    with pytest.raises(ValueError):
        AdjacencyList(-1)


def test_dfs_order_pinned():
    g = AdjacencyList(4)
    for vertex, target in [(0, 1), (0, 2), (1, 3)]:
        g.add_edge(vertex, target)
    assert g.dfs() == [0, 1, 3, 2]


def test_bfs_interleaves_new_start_vertices():
    g = AdjacencyList(4)
    g.add_edge(0, 2)
    g.add_edge(2, 3)
    assert g.bfs() == [0, 2, 1, 3]


@pytest.mark.parametrize("method", ["dfs", "bfs"])
def test_full_traversals_visit_every_vertex_once(graph, method):
    order = getattr(graph, method)()
    assert sorted(order) == list(range(SIZE))
    assert order[0] == 0


def test_dfs_from_chain():
    adjacency = [[1], [2], [3], []]
    assert dfs_from(adjacency, 0) == list(range(4))


def test_bfs_and_dfs_reach_same_vertices(graph):
    for start in range(SIZE):
        bfs = bfs_from(graph, start)
        dfs = dfs_from(graph, start)
        assert bfs[0] == dfs[0] == start
        assert set(bfs) == set(dfs)
        assert len(bfs) == len(set(bfs))
        assert len(dfs) == len(set(dfs))


def test_traversal_excludes_unreachable(graph):
    reached = set(bfs_from(graph, 3))
    assert 0 not in reached
    assert 7 not in set(dfs_from(graph, 0))


def test_bfs_from_visits_neighbours_before_their_neighbours():
    adjacency = [[1, 2], [3], [4], [], []]
    order = bfs_from(adjacency, 0)
    assert order.index(2) < order.index(3)
    assert order.index(1) < order.index(4)