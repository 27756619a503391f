"""CLI entrypoint for AgentShield scoring."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from agentshield import __version__
from agentshield.cli.handlers import handle_score, handle_validate_config
from agentshield.constants.branding import CLI_DESCRIPTION


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="agentshield",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    score = subparsers.add_parser("score", help="Score scanner results and print the grade")
    score.add_argument(
        "-i",
        "--input",
        type=Path,
        action="append",
        required=True,
        help="Scanner results JSON file (repeat flag for multiple files)",
    )
    score.add_argument(
        "-r",
        "--root",
        type=Path,
        default=None,
        help="Directory holding agentshield.yaml (default: current directory)",
    )
    score.add_argument("-c", "--config", type=Path, help="Explicit config file")
    score.add_argument("-o", "--output", type=Path, default=None, help="Write the JSON report to this path")
    score.add_argument("--no-stdout", action="store_true", help="Silence stdout output")
    score.add_argument("--no-color", action="store_true", help="Disable colored output")
    score.add_argument("-v", "--verbose", action="store_true", help="Show policy fingerprint and scanner breakdown")
    score.add_argument("-d", "--details", action="store_true", help="List every finding grouped by scanner")

    validate = subparsers.add_parser("validate-config", help="Validate configuration without scoring")
    validate.add_argument("-r", "--root", type=Path, required=True, help="Directory holding agentshield.yaml")
    validate.add_argument("-c", "--config", type=Path, help="Explicit config file")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if getattr(args, "verbose", False) else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")

    if args.command == "validate-config":
        return handle_validate_config(args)
    if args.command == "score":
        return handle_score(args)

    parser.error(f"Unsupported command: {args.command}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
