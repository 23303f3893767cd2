"""Edge-list ingestion and the file pipeline."""

from snapstat.ingestion.edge_list import (
    EdgeParseError,
    load_graph_from_file,
    parse_edge_line,
    read_edge_list,
)
from snapstat.ingestion.pipeline import run_pipeline_on_file

__all__ = [
    "EdgeParseError",
    "load_graph_from_file",
    "parse_edge_line",
    "read_edge_list",
    "run_pipeline_on_file",
]
