"""Loading scanner results produced by external scanners."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from agentshield.exceptions import ScanInputError
from agentshield.io.json_io import load_json_file
from agentshield.model import ScanResult

logger = logging.getLogger(__name__)


def load_scan_results(path: Path) -> list[ScanResult]:
    """Load scan results from a JSON file.

    Accepts either a bare list of results or a report document carrying
    them under ``results``.
    """
    try:
        payload = load_json_file(path)
    except FileNotFoundError as exc:
        raise ScanInputError(f"Results file not found: {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ScanInputError(f"Cannot read results file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ScanInputError(f"Invalid JSON in results file {path}: {exc}") from exc

    if isinstance(payload, dict) and "results" in payload:
        payload = payload["results"]
    if not isinstance(payload, list):
        raise ScanInputError(f"Results file {path} must contain a list of scan results or a `results` list")

    results = [ScanResult.from_dict(item) for item in payload]
    logger.debug("Loaded %d scan results from %s", len(results), path)
    return results
