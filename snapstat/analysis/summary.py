"""
NetworkSummary: the combined result of every analysis over one GraphStore.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class NetworkSummary:
    """
    Node/edge counts plus the three independent analysis results.
    closeness_centrality is ordered by enumeration index.
    """

    node_count: int
    edge_count: int
    degree_histogram: dict[int, int] = field(default_factory=dict)
    second_degree_histogram: dict[int, int] = field(default_factory=dict)
    closeness_centrality: dict[int, float] = field(default_factory=dict)
