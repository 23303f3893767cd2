"""
Approximate closeness centrality for a prefix of the node set.

score(v) = 1 / sum(shortest hop distance from v to each node v reaches),
or 0.0 when v reaches nothing but itself.
"""

from __future__ import annotations

from snapstat.graph.store import GraphStore

from snapstat.analysis.shortest_paths import shortest_distances

DEFAULT_CENTRALITY_LIMIT = 1000


def closeness_score(store: GraphStore, node: int) -> float:
    total_distance = sum(shortest_distances(store, node).values())
    if total_distance > 0:
        return 1.0 / total_distance
    return 0.0


def compute_closeness_centrality(
    store: GraphStore,
    limit: int = DEFAULT_CENTRALITY_LIMIT,
) -> dict[int, float]:
    """
    Score the first min(node_count, limit) nodes in store order.
    Keys are enumeration indices (0-based position in store.nodes()), not node ids;
    the dict is ordered by index.
    """
    if limit < 0:
        raise ValueError(f"centrality limit must be non-negative, got {limit}")
    scores: dict[int, float] = {}
    for index, node in store.nodes():
        if index >= limit:
            break
        scores[index] = closeness_score(store, node)
    return scores
