"""
NetworkSummary output: deterministic JSON serialization and the plain-text console report.
"""

from __future__ import annotations

from snapstat.analysis.summary import NetworkSummary

SUMMARY_SCHEMA_VERSION = "1.0"
SCORE_PRECISION = 20


def _histogram_to_dict(histogram: dict[int, int]) -> dict[str, int]:
    """JSON object keys must be strings; order by numeric key."""
    return {str(k): v for k, v in sorted(histogram.items())}


def summary_to_dict(summary: NetworkSummary, *, top: int | None = None) -> dict:
    """
    Return a JSON-serializable dict with deterministic ordering.
    Same NetworkSummary -> same dict (and same JSON with sort_keys=True).
    top, when given, keeps only the first top centrality entries by index.
    """
    scores = sorted(summary.closeness_centrality.items())
    if top is not None:
        scores = scores[:top]
    return {
        "schema_version": SUMMARY_SCHEMA_VERSION,
        "node_count": summary.node_count,
        "edge_count": summary.edge_count,
        "degree_histogram": _histogram_to_dict(summary.degree_histogram),
        "second_degree_histogram": _histogram_to_dict(summary.second_degree_histogram),
        "closeness_centrality": [
            {"index": index, "score": score} for index, score in scores
        ],
        "closeness_centrality_count": len(summary.closeness_centrality),
    }


def format_report(summary: NetworkSummary, *, top: int = 10) -> str:
    """Human-readable report: counts, distributions, first top centrality scores."""
    lines = [
        "Graph constructed successfully!",
        "Basic Network Analysis:",
        f"Number of nodes: {summary.node_count}",
        f"Number of edges: {summary.edge_count}",
        f"Degree Distribution: {dict(sorted(summary.degree_histogram.items()))}",
        "Second-Degree Distribution: "
        f"{dict(sorted(summary.second_degree_histogram.items()))}",
        "Closeness Centrality Scores:",
    ]
    for index, score in sorted(summary.closeness_centrality.items())[:top]:
        lines.append(
            f"Node {index}: Closeness Centrality = {score:.{SCORE_PRECISION}f}"
        )
    return "\n".join(lines)
