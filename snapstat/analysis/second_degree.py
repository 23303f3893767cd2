"""
Second-degree distribution: per node, the number of distinct nodes reachable in
exactly two directed hops, bucketed into a histogram.
"""

from __future__ import annotations

from snapstat.graph.store import GraphStore


def _count_with_stamps(store: GraphStore, node: int, stamps: list[int]) -> int:
    """
    Count distinct out-neighbors of out-neighbors of node.
    stamps[v] == node marks v as already counted for this source, so the buffer
    never needs clearing between sources as long as each source is used once.
    """
    count = 0
    for neighbor in store.out_neighbors(node):
        for second in store.out_neighbors(neighbor):
            if stamps[second] != node:
                stamps[second] = node
                count += 1
    return count


def count_second_degree(store: GraphStore, node: int) -> int:
    """Distinct two-hop successors of node (node itself included when a 2-cycle exists)."""
    stamps = [-1] * store.node_count()
    return _count_with_stamps(store, node, stamps)


def compute_second_degree_histogram(store: GraphStore) -> dict[int, int]:
    """
    Map distinct second-hop count -> number of nodes with that count.
    Nodes with no out-edges land in bucket 0.
    """
    stamps = [-1] * store.node_count()
    histogram: dict[int, int] = {}
    for _, node in store.nodes():
        count = _count_with_stamps(store, node, stamps)
        histogram[count] = histogram.get(count, 0) + 1
    return histogram
