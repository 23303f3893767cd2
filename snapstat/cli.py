"""
snapstat CLI: command-line interface for edge-list network statistics.
"""

import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path

from snapstat.config import load_analysis_config
from snapstat.ingestion import run_pipeline_on_file
from snapstat.report import format_report, summary_to_dict


def main(argv: list[str] | None = None) -> int:
    """
    Main CLI entry point.

    Returns:
        Exit code: 0 on success, 1 on errors/warnings
    """
    parser = argparse.ArgumentParser(
        description="snapstat: degree, second-degree and closeness statistics for a directed edge list"
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # analyze command
    analyze_parser = subparsers.add_parser("analyze", help="Analyze an edge-list file")
    analyze_parser.add_argument("path", help="Path to edge-list file")
    analyze_parser.add_argument(
        "--config",
        help="Analysis settings YAML file path (default: built-in settings)",
    )
    analyze_parser.add_argument(
        "--output",
        help="Output file path (default: print to stdout)",
    )
    analyze_parser.add_argument(
        "--json",
        action="store_true",
        help="Emit JSON instead of the text report",
    )
    analyze_parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Abort on the first malformed edge line instead of skipping it",
    )
    analyze_parser.add_argument(
        "--top",
        type=int,
        help="Number of centrality scores to show (default: config report_top)",
    )
    analyze_parser.add_argument(
        "--centrality-limit",
        type=int,
        help="Score only the first N nodes (default: config centrality_limit)",
    )

    args = parser.parse_args(argv)

    if args.command == "analyze":
        return _run_analyze(args)
    else:
        parser.print_help()
        return 1


def _run_analyze(args: argparse.Namespace) -> int:
    """
    Run the analyze command.

    Returns:
        Exit code: 0 on success, 1 on errors/warnings
    """
    try:
        path_obj = Path(args.path)
        if not path_obj.exists():
            print(f"Error: Path does not exist: {args.path}", file=sys.stderr)
            return 1

        cfg = load_analysis_config(args.config)
        overrides = {}
        if args.centrality_limit is not None:
            overrides["centrality_limit"] = args.centrality_limit
        if args.top is not None:
            overrides["report_top"] = args.top
        if overrides:
            cfg = load_analysis_config({**asdict(cfg), **overrides})

        summary, warnings = run_pipeline_on_file(path_obj, config=cfg, strict=args.strict)

        for warning in warnings:
            print(f"Warning: {warning}", file=sys.stderr)

        if summary is None:
            print(f"Error: could not analyze {args.path}", file=sys.stderr)
            return 1

        if args.json:
            output_text = json.dumps(
                summary_to_dict(summary, top=cfg.report_top), indent=2, sort_keys=True
            )
        else:
            output_text = format_report(summary, top=cfg.report_top)

        if args.output:
            Path(args.output).write_text(output_text + "\n", encoding="utf-8")
        else:
            print(output_text)

        # Non-zero exit code if warnings present
        return 1 if warnings else 0

    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130
    except (OSError, ValueError, TypeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
