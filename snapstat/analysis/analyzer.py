"""
GraphAnalyzer: run degree, second-degree and closeness analyses over a GraphStore -> NetworkSummary.
"""

from __future__ import annotations

from snapstat.config import AnalysisConfig, load_analysis_config
from snapstat.graph.store import GraphStore

from snapstat.analysis.centrality import compute_closeness_centrality
from snapstat.analysis.degree import compute_degree_histogram
from snapstat.analysis.second_degree import compute_second_degree_histogram
from snapstat.analysis.summary import NetworkSummary


class GraphAnalyzer:
    """Read-only analyzer; the store is never mutated so results are order-independent."""

    def __init__(self, config: AnalysisConfig | None = None) -> None:
        self.config = config if config is not None else load_analysis_config(None)

    def analyze(self, store: GraphStore) -> NetworkSummary:
        cfg = self.config
        degree_histogram = compute_degree_histogram(store)
        second_degree_histogram = (
            compute_second_degree_histogram(store) if cfg.second_degree else {}
        )
        closeness = (
            compute_closeness_centrality(store, limit=cfg.centrality_limit)
            if cfg.centrality
            else {}
        )
        return NetworkSummary(
            node_count=store.node_count(),
            edge_count=store.edge_count(),
            degree_histogram=degree_histogram,
            second_degree_histogram=second_degree_histogram,
            closeness_centrality=closeness,
        )


def analyze(
    store: GraphStore,
    config: AnalysisConfig | str | dict | None = None,
) -> NetworkSummary:
    """Convenience: GraphAnalyzer(load_analysis_config(config)).analyze(store)."""
    return GraphAnalyzer(load_analysis_config(config)).analyze(store)
