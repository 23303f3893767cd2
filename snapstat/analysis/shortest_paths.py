"""
Unweighted single-source shortest distances (breadth-first, forward edges only).
"""

from __future__ import annotations

from collections import deque

from snapstat.graph.store import GraphStore


def shortest_distances(store: GraphStore, source: int) -> dict[int, int]:
    """
    Hop distance from source to every node it can reach, source included at 0.
    Unreachable nodes are absent. Keys are in discovery order.
    """
    distances: dict[int, int] = {source: 0}
    q: deque[int] = deque([source])
    while q:
        node = q.popleft()
        next_distance = distances[node] + 1
        for succ in store.out_neighbors(node):
            if succ not in distances:
                distances[succ] = next_distance
                q.append(succ)
    return distances
