"""
Out-degree distribution.
"""

from __future__ import annotations

from snapstat.graph.store import GraphStore


def compute_degree_histogram(store: GraphStore) -> dict[int, int]:
    """
    Map out-degree -> number of nodes with that out-degree.
    Parallel edges each count toward the degree.
    """
    histogram: dict[int, int] = {}
    for _, node in store.nodes():
        degree = store.out_degree(node)
        histogram[degree] = histogram.get(degree, 0) + 1
    return histogram
