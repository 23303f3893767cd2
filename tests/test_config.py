"""
Tests for analysis settings loader: YAML loading, dict construction, defaults, error handling.
"""

import tempfile
from pathlib import Path

import pytest

from snapstat.config import AnalysisConfig, default_analysis_config, load_analysis_config


def test_default_analysis_config():
    """Returns correct default values."""
    cfg = default_analysis_config()
    assert cfg.centrality_limit == 1000
    assert cfg.report_top == 10
    assert cfg.strict is False
    assert cfg.second_degree is True
    assert cfg.centrality is True
    with pytest.raises(Exception):  # dataclass.FrozenInstanceError
        cfg.strict = True


def test_load_none_and_passthrough():
    """None returns defaults; an AnalysisConfig is returned as-is."""
    assert load_analysis_config(None) == default_analysis_config()
    original = AnalysisConfig(centrality_limit=5)
    assert load_analysis_config(original) is original


def test_load_dict_partial():
    """Missing keys keep defaults."""
    cfg = load_analysis_config({"centrality_limit": 50, "strict": True})
    assert cfg.centrality_limit == 50
    assert cfg.strict is True
    assert cfg.report_top == 10


def test_load_dict_rejects_unknown_and_bad_types():
    """Unknown keys, wrong types and negative counts raise ValueError."""
    with pytest.raises(ValueError, match="Unknown"):
        load_analysis_config({"weights": True})
    with pytest.raises(ValueError):
        load_analysis_config({"centrality_limit": "100"})
    with pytest.raises(ValueError):
        load_analysis_config({"centrality_limit": True})
    with pytest.raises(ValueError):
        load_analysis_config({"report_top": -1})
    with pytest.raises(ValueError):
        load_analysis_config({"strict": "yes"})


def test_load_unsupported_type():
    """Other source types raise TypeError."""
    with pytest.raises(TypeError):
        load_analysis_config(42)


def test_load_yaml_root_and_nested():
    """YAML fields may sit at the root or under 'analysis'."""
    with tempfile.TemporaryDirectory() as tmp:
        root = Path(tmp)
        flat = root / "flat.yaml"
        flat.write_text("centrality_limit: 20\nreport_top: 3\n", encoding="utf-8")
        nested = root / "nested.yaml"
        nested.write_text("analysis:\n  second_degree: false\n", encoding="utf-8")

        cfg = load_analysis_config(flat)
        assert cfg.centrality_limit == 20
        assert cfg.report_top == 3

        cfg = load_analysis_config(str(nested))
        assert cfg.second_degree is False
        assert cfg.centrality_limit == 1000


def test_load_yaml_errors():
    """Missing, empty, invalid and non-mapping YAML files are rejected."""
    with tempfile.TemporaryDirectory() as tmp:
        root = Path(tmp)
        with pytest.raises(FileNotFoundError):
            load_analysis_config(root / "missing.yaml")

        empty = root / "empty.yaml"
        empty.write_text("", encoding="utf-8")
        with pytest.raises(ValueError, match="empty"):
            load_analysis_config(empty)

        broken = root / "broken.yaml"
        broken.write_text("centrality_limit: [1, 2\n", encoding="utf-8")
        with pytest.raises(ValueError):
            load_analysis_config(broken)

        listing = root / "list.yaml"
        listing.write_text("- 1\n- 2\n", encoding="utf-8")
        with pytest.raises(ValueError):
            load_analysis_config(listing)
