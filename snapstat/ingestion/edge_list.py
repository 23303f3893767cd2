"""
Edge-list ingestion: one "source target" pair of non-negative integers per line.
Lines starting with '#' are comments; lines with any other token count are skipped.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable

from snapstat.graph.store import GraphStore, build_graph_store

_NODE_ID = re.compile(r"\+?[0-9]+")

# Largest id an unsigned 64-bit index can hold
MAX_NODE_ID = 2**64 - 1


class EdgeParseError(ValueError):
    """A two-token edge line whose tokens are not non-negative integers."""

    def __init__(self, message: str, *, line: str, line_number: int | None = None) -> None:
        super().__init__(message)
        self.line = line
        self.line_number = line_number


def _parse_node_id(token: str, line: str) -> int:
    if not _NODE_ID.fullmatch(token):
        raise EdgeParseError(f"invalid node id {token!r}", line=line)
    value = int(token)
    if value > MAX_NODE_ID:
        raise EdgeParseError(f"node id {token!r} exceeds {MAX_NODE_ID}", line=line)
    return value


def parse_edge_line(line: str) -> tuple[int, int] | None:
    """
    Parse one line into (source, target).
    Returns None for comments, blank lines and lines without exactly two tokens.
    Raises EdgeParseError when either token is not a non-negative integer.
    """
    if line.startswith("#"):
        return None
    tokens = line.split()
    if len(tokens) != 2:
        return None
    return _parse_node_id(tokens[0], line), _parse_node_id(tokens[1], line)


def read_edge_list(
    lines: Iterable[str],
    *,
    strict: bool = False,
    source: str = "<stream>",
) -> tuple[list[tuple[int, int]], list[str]]:
    """
    Collect edges from lines.

    Args:
        lines: Text lines (trailing newlines allowed)
        strict: If True, the first malformed line raises EdgeParseError;
            otherwise it is skipped and a warning is recorded
        source: Label used in warning messages (usually the file path)

    Returns:
        (edges in input order, list of warning strings)
    """
    edges: list[tuple[int, int]] = []
    warnings: list[str] = []
    for line_number, line in enumerate(lines, start=1):
        try:
            edge = parse_edge_line(line)
        except EdgeParseError as e:
            e.line_number = line_number
            if strict:
                raise
            warnings.append(
                f"{source}:{line_number}: skipped malformed line {line.rstrip()!r} ({e})"
            )
            continue
        if edge is not None:
            edges.append(edge)
    return edges, warnings


def load_graph_from_file(
    path: str | Path,
    *,
    strict: bool = False,
) -> tuple[GraphStore, list[str]]:
    """
    Read an edge-list file and build a frozen GraphStore.
    OSError (missing or unreadable file) propagates to the caller.
    """
    file_path = Path(path)
    with file_path.open(encoding="utf-8") as f:
        edges, warnings = read_edge_list(f, strict=strict, source=str(file_path))
    return build_graph_store(edges), warnings
