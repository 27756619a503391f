"""CLI subcommand handlers and exit-code evaluation."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from agentshield.config import config_fingerprint, load_config, validate_config_file
from agentshield.constants.config import CONFIG_FILENAME
from agentshield.constants.reporting import EXIT_CLEAN, EXIT_CRITICAL, EXIT_ERROR, EXIT_HIGH
from agentshield.exceptions import ConfigError, ScanInputError
from agentshield.exceptions.validation import format_errors
from agentshield.io import load_scan_results
from agentshield.model import ReportSummary, ScanResult
from agentshield.reporting import StdoutReporter, write_summary_report
from agentshield.scoring import ScoringEngine

logger = logging.getLogger(__name__)


def evaluate_exit_code(summary: ReportSummary) -> int:
    """Map raw severity counts to a CI exit code.

    Uses raw counts, not the composite score: a single critical fails the
    run even when the score grades well.
    """
    if summary.critical > 0:
        return EXIT_CRITICAL
    if summary.high > 0:
        return EXIT_HIGH
    return EXIT_CLEAN


def handle_score(args: argparse.Namespace) -> int:
    """Score scanner result files and report the outcome."""
    root: Path = args.root if args.root is not None else Path.cwd()
    try:
        config = load_config(root, args.config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return EXIT_ERROR

    results: list[ScanResult] = []
    try:
        for path in args.input:
            results.extend(load_scan_results(path))
    except ScanInputError as exc:
        print(f"Input error: {exc}", file=sys.stderr)
        return EXIT_ERROR

    summary = ScoringEngine(config.scoring).calculate_summary(results)
    fingerprint = config_fingerprint(config)
    logger.debug("Scored %d results with policy %s", len(results), fingerprint)

    if args.output is not None:
        try:
            write_summary_report(args.output, summary, results=results, fingerprint=fingerprint)
        except OSError as exc:
            print(f"Output error: cannot write report to {args.output}: {exc}", file=sys.stderr)
            return EXIT_ERROR
        logger.info("Report written to %s", args.output)

    if not args.no_stdout:
        use_color = not args.no_color and sys.stdout.isatty()
        reporter = StdoutReporter(
            summary,
            color=use_color,
            verbose=args.verbose,
            fingerprint=fingerprint,
            results=results if args.details else None,
        )
        print(reporter.render())

    return evaluate_exit_code(summary)


def handle_validate_config(args: argparse.Namespace) -> int:
    """Run config validation and report results."""
    root: Path = args.root
    if not root.is_dir():
        print(f"Configuration error: root directory does not exist: {root}", file=sys.stderr)
        return EXIT_ERROR

    errors = validate_config_file(root, args.config, config_explicit=args.config is not None)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return EXIT_ERROR

    target = args.config if args.config is not None else root / CONFIG_FILENAME
    print(f"Configuration is valid. ({target})")
    return EXIT_CLEAN
