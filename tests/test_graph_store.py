"""Tests for GraphStore and two-phase build_graph_store."""

import pytest

from snapstat.graph import GraphStore, build_graph_store


def test_add_node_returns_dense_ids():
    """add_node hands out 0, 1, 2, ... and node_count follows."""
    store = GraphStore()
    assert [store.add_node() for _ in range(3)] == [0, 1, 2]
    assert store.node_count() == 3
    assert store.edge_count() == 0


def test_add_edge_keeps_duplicates_in_insertion_order():
    """Parallel edges are kept; out_neighbors preserves insertion order."""
    store = GraphStore()
    for _ in range(3):
        store.add_node()
    store.add_edge(0, 2)
    store.add_edge(0, 1)
    store.add_edge(0, 2)
    assert store.out_neighbors(0) == [2, 1, 2]
    assert store.out_degree(0) == 3
    assert store.out_neighbors(1) == []
    assert store.edge_count() == 3


def test_add_edge_requires_existing_endpoints():
    """Endpoints outside [0, node_count) raise IndexError."""
    store = GraphStore()
    store.add_node()
    with pytest.raises(IndexError):
        store.add_edge(0, 1)
    with pytest.raises(IndexError):
        store.add_edge(-1, 0)
    with pytest.raises(IndexError):
        store.out_neighbors(5)
    assert store.edge_count() == 0


def test_nodes_enumerates_in_creation_order():
    """nodes() yields (enumeration_index, node_id) pairs."""
    store = GraphStore()
    for _ in range(4):
        store.add_node()
    assert list(store.nodes()) == [(0, 0), (1, 1), (2, 2), (3, 3)]


def test_frozen_store_rejects_mutation():
    """After freeze(), add_node and add_edge raise RuntimeError."""
    store = GraphStore()
    store.add_node()
    store.freeze()
    assert store.frozen is True
    with pytest.raises(RuntimeError):
        store.add_node()
    with pytest.raises(RuntimeError):
        store.add_edge(0, 0)


def test_build_sizes_by_largest_endpoint():
    """Nodes 0..max all exist, even ids never mentioned in an edge."""
    store = build_graph_store([(10, 20)])
    assert store.node_count() == 21
    assert store.edge_count() == 1
    assert list(store.out_neighbors(10)) == [20]
    assert list(store.out_neighbors(0)) == []
    assert store.frozen is True


def test_build_node_count_pads_but_never_shrinks():
    """Explicit node_count adds isolated nodes; a smaller value is ignored."""
    assert build_graph_store([(0, 1)], node_count=5).node_count() == 5
    assert build_graph_store([(0, 4)], node_count=2).node_count() == 5


def test_build_empty():
    """No edges -> empty store."""
    store = build_graph_store([])
    assert store.node_count() == 0
    assert store.edge_count() == 0
    assert list(store.nodes()) == []


def test_build_rejects_negative_ids():
    """Negative endpoints are invalid node ids."""
    with pytest.raises(ValueError):
        build_graph_store([(0, -1)])


def test_build_matches_incremental_growth():
    """Two-phase build equals growing the store node by node as edges arrive."""
    edges = [(3, 1), (0, 3), (3, 1), (5, 2), (2, 2)]
    incremental = GraphStore()
    for source, target in edges:
        while incremental.node_count() <= max(source, target):
            incremental.add_node()
        incremental.add_edge(source, target)

    built = build_graph_store(edges)
    assert built.node_count() == incremental.node_count() == 6
    assert built.edge_count() == incremental.edge_count() == 5
    for _, node in built.nodes():
        assert list(built.out_neighbors(node)) == list(incremental.out_neighbors(node))


def test_frozen_neighbors_cannot_alter_store():
    """Neighbor sequences from a frozen store are immutable; degree and edge count stay in step."""
    store = build_graph_store([(0, 1)])
    neighbors = store.out_neighbors(0)
    assert isinstance(neighbors, tuple)
    with pytest.raises(AttributeError):
        neighbors.append(1)
    assert store.out_degree(0) == store.edge_count() == 1


def test_freeze_keeps_successor_order():
    """Freezing a hand-built store preserves successors and their order."""
    store = GraphStore()
    for _ in range(2):
        store.add_node()
    store.add_edge(0, 1)
    store.add_edge(0, 0)
    store.freeze().freeze()
    assert store.out_neighbors(0) == (1, 0)
    assert store.out_neighbors(1) == ()
