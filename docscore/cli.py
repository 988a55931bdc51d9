"""CLI entrypoint for the docscore report generator."""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path

from .config import ConfigError, DocScoreConfig, load_config
from .logging import configure_logging
from .pipeline import ScorePipeline
from .report import ReportWriteError


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docscore",
        description="Produce a prioritized spreadsheet of documentation pages needing tests.",
    )
    parser.add_argument(
        "-docspath",
        "--docspath",
        "--docs-path",
        dest="docs_path",
        default=None,
        help="Points to the cloned path of the istio.io site (default: ../istio.io).",
    )
    parser.add_argument(
        "-outpath",
        "--outpath",
        "--out-path",
        dest="out_path",
        default=None,
        help="Path to create the spreadsheet CSV at (default: out.csv).",
    )
    parser.add_argument(
        "-analyticspath",
        "--analyticspath",
        "--analytics-path",
        dest="analytics_path",
        default=None,
        help="Path to a file containing the istio.io analytics CSV (default: analytics.csv).",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a .docscore.yml file (defaults to the current directory).",
    )
    parser.add_argument(
        "--max-score",
        type=int,
        default=None,
        help="Score ceiling shared by every scorer (default: 15).",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    verbosity.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        default=False,
        help="Only report warnings and errors.",
    )
    return parser


def _apply_overrides(config: DocScoreConfig, args: argparse.Namespace) -> DocScoreConfig:
    overrides: dict[str, object] = {}
    if args.docs_path is not None:
        overrides["docs_path"] = Path(args.docs_path)
    if args.out_path is not None:
        overrides["out_path"] = Path(args.out_path)
    if args.analytics_path is not None:
        overrides["analytics_path"] = Path(args.analytics_path)
    if args.max_score is not None:
        overrides["max_score"] = args.max_score
    return replace(config, **overrides) if overrides else config


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for docscore."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.max_score is not None and args.max_score <= 0:
        parser.error("--max-score must be a positive integer")

    try:
        config = load_config(Path(args.config) if args.config else None)
    except ConfigError as exc:
        parser.exit(1, f"docscore: {exc}\n")
    config = _apply_overrides(config, args)

    configure_logging(verbose=bool(args.verbose), quiet=bool(args.quiet), log_file=config.log_file)

    try:
        summary = ScorePipeline(config).run()
    except (FileNotFoundError, NotADirectoryError) as exc:
        parser.exit(1, f"docscore: {exc}\n")
    except ReportWriteError as exc:
        parser.exit(1, f"docscore: report not written: {exc}\n")
    except ValueError as exc:
        parser.exit(1, f"docscore: {exc}\nRun with --verbose for more details.\n")

    print(f"Report with {summary.total} pages written to {_relativize(summary.out_path)}")


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
