"""
Analysis settings loader: supports YAML files, dicts, AnalysisConfig instances, and defaults.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path

import yaml


@dataclass(frozen=True)
class AnalysisConfig:
    """Knobs for one analysis run."""

    centrality_limit: int = 1000  # score only the first N nodes in store order
    report_top: int = 10  # centrality rows shown in reports
    strict: bool = False  # abort ingestion on a malformed edge line
    second_degree: bool = True
    centrality: bool = True


_INT_FIELDS = ("centrality_limit", "report_top")
_BOOL_FIELDS = ("strict", "second_degree", "centrality")


def default_analysis_config() -> AnalysisConfig:
    """
    Return the default settings.

    Returns:
        AnalysisConfig with centrality_limit=1000, report_top=10, strict=False,
        second_degree and centrality enabled.
    """
    return AnalysisConfig()


def load_analysis_config(
    source: AnalysisConfig | str | Path | dict | None,
) -> AnalysisConfig:
    """
    Load an AnalysisConfig from various sources.

    Args:
        source: Can be:
            - AnalysisConfig instance: returned as-is
            - str or Path: treated as YAML file path
            - dict: constructed directly from dict keys
            - None: returns default_analysis_config()

    Returns:
        AnalysisConfig instance

    Raises:
        FileNotFoundError: If source is a file path that doesn't exist
        ValueError: If the YAML is invalid or a field is unknown or has the wrong type
        TypeError: If source is of an unsupported type
    """
    if source is None:
        return default_analysis_config()

    if isinstance(source, AnalysisConfig):
        return source

    if isinstance(source, (str, Path)):
        return _load_from_yaml_file(source)

    if isinstance(source, dict):
        return _load_from_dict(source)

    raise TypeError(
        f"Unsupported source type for load_analysis_config: {type(source).__name__}"
    )


def _load_from_yaml_file(path: str | Path) -> AnalysisConfig:
    """Load AnalysisConfig from a YAML file."""
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"Config file not found: {file_path}")

    try:
        data = yaml.safe_load(file_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        raise ValueError(f"Failed to parse YAML file {file_path}: {e}") from e

    if data is None:
        raise ValueError(f"YAML file {file_path} is empty")
    if not isinstance(data, dict):
        raise ValueError(f"YAML file {file_path}: expected dict, got {type(data).__name__}")

    # Either fields at the root or nested under an "analysis" mapping
    if "analysis" in data:
        section = data["analysis"]
        if not isinstance(section, dict):
            raise ValueError(f"YAML file {file_path}: 'analysis' must be a dict")
        return _load_from_dict(section)
    return _load_from_dict(data)


def _load_from_dict(data: dict) -> AnalysisConfig:
    """
    Construct AnalysisConfig from a dict; missing keys keep their defaults.

    Raises:
        ValueError: If a key is unknown or a value has the wrong type or range
    """
    known = {f.name for f in fields(AnalysisConfig)}
    unknown = sorted(str(k) for k in data if k not in known)
    if unknown:
        raise ValueError(f"Unknown config fields: {', '.join(unknown)}")

    for name in _INT_FIELDS:
        if name in data:
            value = data[name]
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(
                    f"Config '{name}' must be an integer, got {type(value).__name__}"
                )
            if value < 0:
                raise ValueError(f"Config '{name}' must be non-negative, got {value}")

    for name in _BOOL_FIELDS:
        if name in data and not isinstance(data[name], bool):
            raise ValueError(
                f"Config '{name}' must be a boolean, got {type(data[name]).__name__}"
            )

    return AnalysisConfig(**data)
