"""Tests for the report JSON writer."""

from __future__ import annotations

import json
from pathlib import Path

from factories import make_finding, make_result

from agentshield.constants.reporting import SCHEMA_VERSION
from agentshield.reporting import build_report_payload, write_summary_report
from agentshield.scoring import calculate_summary


def test_build_report_payload_minimal() -> None:
    summary = calculate_summary([])

    payload = build_report_payload(summary)

    assert payload == {"schema_version": SCHEMA_VERSION, "summary": summary.to_dict()}


def test_build_report_payload_with_results_and_fingerprint() -> None:
    results = [make_result("Secret Leak Scanner", make_finding("critical"))]

    payload = build_report_payload(calculate_summary(results), results=results, fingerprint="a" * 64)

    assert payload["config_fingerprint"] == "a" * 64
    assert payload["results"][0]["scanner"] == "Secret Leak Scanner"
    assert payload["results"][0]["findings"][0]["severity"] == "critical"


def test_write_summary_report_round_trips_from_disk(tmp_path: Path) -> None:
    results = [make_result("Secret Leak Scanner", make_finding("critical"))]
    out_path = tmp_path / "out" / "agentshield-report.json"

    returned = write_summary_report(out_path, calculate_summary(results))

    on_disk = json.loads(out_path.read_text(encoding="utf-8"))
    assert on_disk == returned
    assert on_disk["summary"]["score"] == 93
    assert on_disk["summary"]["grade"] == "A"
    assert "results" not in on_disk


def test_report_dimension_order_is_stable(tmp_path: Path) -> None:
    out_path = tmp_path / "report.json"

    write_summary_report(out_path, calculate_summary([]))

    dimensions = json.loads(out_path.read_text(encoding="utf-8"))["summary"]["dimensions"]
    assert list(dimensions) == ["codeSafety", "configSafety", "defenseScore", "environmentSafety"]
