"""Graph analyses: degree, second-degree, shortest distances, closeness centrality, GraphAnalyzer."""

from snapstat.analysis.analyzer import GraphAnalyzer, analyze
from snapstat.analysis.centrality import (
    DEFAULT_CENTRALITY_LIMIT,
    closeness_score,
    compute_closeness_centrality,
)
from snapstat.analysis.degree import compute_degree_histogram
from snapstat.analysis.second_degree import (
    compute_second_degree_histogram,
    count_second_degree,
)
from snapstat.analysis.shortest_paths import shortest_distances
from snapstat.analysis.summary import NetworkSummary

__all__ = [
    "DEFAULT_CENTRALITY_LIMIT",
    "GraphAnalyzer",
    "NetworkSummary",
    "analyze",
    "closeness_score",
    "compute_closeness_centrality",
    "compute_degree_histogram",
    "compute_second_degree_histogram",
    "count_second_degree",
    "shortest_distances",
]
