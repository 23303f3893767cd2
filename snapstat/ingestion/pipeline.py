"""
Safe pipeline runner: load settings, read the edge list, build the store, analyze.
Never raises for unreadable or malformed input; collects warnings.
"""

from __future__ import annotations

from pathlib import Path

from snapstat.analysis import GraphAnalyzer, NetworkSummary
from snapstat.config import AnalysisConfig, load_analysis_config
from snapstat.ingestion.edge_list import EdgeParseError, load_graph_from_file


def run_pipeline_on_file(
    path: Path | str,
    *,
    config: AnalysisConfig | str | Path | dict | None = None,
    strict: bool | None = None,
) -> tuple[NetworkSummary | None, list[str]]:
    """
    Run the full pipeline on one edge-list file.

    Args:
        path: Edge-list file path
        config: Analysis settings. Can be:
            - AnalysisConfig instance
            - str/Path: YAML file path
            - dict: settings dict
            - None: defaults
        strict: Overrides config.strict when not None

    Returns:
        (NetworkSummary, warnings) on success; (None, warnings) when the file
        could not be read or strict parsing failed. No analysis runs in that case.
    """
    warnings: list[str] = []

    try:
        cfg = load_analysis_config(config)
    except (OSError, ValueError, TypeError) as e:
        warnings.append(f"Failed to load config: {e}. Using default settings.")
        cfg = load_analysis_config(None)

    effective_strict = cfg.strict if strict is None else strict

    try:
        store, read_warnings = load_graph_from_file(path, strict=effective_strict)
    except EdgeParseError as e:
        warnings.append(f"{path}:{e.line_number}: malformed line {e.line.rstrip()!r} ({e})")
        return None, warnings
    except (OSError, UnicodeDecodeError) as e:
        warnings.append(f"{path}: could not read ({e})")
        return None, warnings

    warnings.extend(read_warnings)
    return GraphAnalyzer(cfg).analyze(store), warnings
