"""Command line entry point for pattern-catalog."""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError

from pattern_catalog.catalog import PatternCatalog, build_default_catalog
from pattern_catalog.config import Settings
from pattern_catalog.exceptions import UnknownPatternError
from pattern_catalog.observability.logging import configure_logging
from pattern_catalog.observability.metrics import get_metrics
from pattern_catalog.observability.tracing import init_tracing


logger = logging.getLogger(__name__)


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pattern-catalog",
        description="Run small demonstrations of classic object-oriented design patterns.",
    )
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error", "critical"],
        help="Logging level (default: PATTERN_CATALOG_LOG_LEVEL or warning).",
    )
    parser.add_argument("--json-logs", action="store_true", help="Emit structured JSON logs on stderr.")
    parser.add_argument("--trace", action="store_true", help="Print finished spans to stderr.")

    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("list", help="List the available demonstrations.")

    run_parser = subparsers.add_parser("run", help="Run demonstrations (all of them when no name is given).")
    run_parser.add_argument("patterns", nargs="*", metavar="NAME", help="Demonstration names, in run order.")
    run_parser.add_argument("--no-headers", action="store_true", help="Do not print a heading before each demo.")
    run_parser.add_argument(
        "--metrics",
        action="store_true",
        help="Write Prometheus metrics for the run to stderr when finished.",
    )
    return parser


def _list_demos(catalog: PatternCatalog) -> int:
    for index, demo in enumerate(catalog, start=1):
        print(f"{index}. {demo.name} - {demo.summary}")
    return 0


def _run_demos(catalog: PatternCatalog, names: list[str], *, headers: bool, metrics: bool) -> int:
    try:
        selected = [catalog.get(name) for name in names] if names else list(catalog)
    except UnknownPatternError as exc:
        logger.error("%s", exc)
        return 2

    for position, demo in enumerate(selected):
        if headers:
            if position:
                print()
            print(f"=== {demo.title} ===")
        catalog.run(demo.name)

    if metrics:
        sys.stderr.write(get_metrics().decode("utf-8"))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, set up logging and tracing, and dispatch the subcommand."""
    args = build_argument_parser().parse_args(argv)

    try:
        settings = Settings()
    except ValidationError as exc:
        configure_logging("error")
        logger.error("Configuration is invalid: %s", exc)
        return 1

    configure_logging(
        args.log_level or settings.log_level,
        json_output=args.json_logs or settings.is_json_logging(),
    )
    init_tracing(settings.service_name, console=args.trace or settings.trace_console)

    catalog = build_default_catalog()
    if args.command == "list":
        return _list_demos(catalog)
    return _run_demos(catalog, args.patterns, headers=not args.no_headers, metrics=args.metrics)
