"""Output writer for the scoring report JSON artifact."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from agentshield.constants.reporting import SCHEMA_VERSION
from agentshield.io import write_json_atomic
from agentshield.model import ReportSummary, ScanResult
from agentshield.types import JsonObject


def build_report_payload(
    summary: ReportSummary,
    *,
    results: Sequence[ScanResult] | None = None,
    fingerprint: str | None = None,
) -> JsonObject:
    """Build the report document written to disk."""
    payload: JsonObject = {
        "schema_version": SCHEMA_VERSION,
        "summary": summary.to_dict(),
    }
    if fingerprint is not None:
        payload["config_fingerprint"] = fingerprint
    if results is not None:
        payload["results"] = [result.to_dict() for result in results]
    return payload


def write_summary_report(
    out_path: Path,
    summary: ReportSummary,
    *,
    results: Sequence[ScanResult] | None = None,
    fingerprint: str | None = None,
) -> JsonObject:
    """Write the report document atomically and return it."""
    payload = build_report_payload(summary, results=results, fingerprint=fingerprint)
    write_json_atomic(out_path, payload)
    return payload
