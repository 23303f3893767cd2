"""In-memory graph store."""

from snapstat.graph.store import GraphStore, build_graph_store

__all__ = [
    "GraphStore",
    "build_graph_store",
]
