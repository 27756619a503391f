"""Tests for scanner registration, selection and graceful degradation."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from factories import make_finding, make_result

from agentshield.model import ScanResult
from agentshield.scanner import Scanner, ScannerRegistry, select_scanners
from agentshield.scoring import calculate_summary


class _SecretScanner(Scanner):
    name = "Secret Leak Scanner"
    description = "Finds hardcoded credentials."

    def scan(self, target: Path) -> ScanResult:
        return make_result(self.name, make_finding("critical"), files_scanned=3, duration=7)


class _ConfigScanner(Scanner):
    name = "MCP Config Auditor"

    def scan(self, target: Path) -> ScanResult:
        return make_result(self.name, make_finding("high", scanner=self.name), files_scanned=1, duration=4)


class _BrokenScanner(Scanner):
    name = "Red Team Simulator"

    def scan(self, target: Path) -> ScanResult:
        raise RuntimeError("simulator crashed")


def test_concrete_scanner_requires_name() -> None:
    with pytest.raises(TypeError, match="non-empty class attribute `name`"):

        class _Nameless(Scanner):
            def scan(self, target: Path) -> ScanResult:
                return ScanResult(scanner="")


def test_abstract_intermediate_scanner_may_omit_name() -> None:
    class _Base(Scanner):
        pass

    assert _Base.__name__ == "_Base"


def test_registry_runs_scanners_in_registration_order(tmp_path: Path) -> None:
    registry = ScannerRegistry([_SecretScanner()])
    registry.register(_ConfigScanner())

    results = registry.run_all(tmp_path)

    assert [result.scanner for result in results] == ["Secret Leak Scanner", "MCP Config Auditor"]
    assert [scanner.name for scanner in registry.scanners] == ["Secret Leak Scanner", "MCP Config Auditor"]


def test_registry_scanners_property_is_a_copy() -> None:
    registry = ScannerRegistry([_SecretScanner()])

    registry.scanners.clear()

    assert len(registry.scanners) == 1


def test_failing_scanner_yields_empty_result_and_warning(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    registry = ScannerRegistry([_SecretScanner(), _BrokenScanner(), _ConfigScanner()])

    with caplog.at_level(logging.WARNING, logger="agentshield.scanner.registry"):
        results = registry.run_all(tmp_path)

    broken = results[1]
    assert broken.scanner == "Red Team Simulator"
    assert broken.findings == ()
    assert broken.files_scanned == 0
    assert broken.duration >= 0
    assert "Scanner Red Team Simulator failed" in caplog.text
    assert "simulator crashed" in caplog.text


def test_failed_scanner_does_not_penalize_score(tmp_path: Path) -> None:
    healthy = ScannerRegistry([_SecretScanner(), _ConfigScanner()]).run_all(tmp_path)
    degraded = ScannerRegistry([_SecretScanner(), _BrokenScanner(), _ConfigScanner()]).run_all(tmp_path)

    assert calculate_summary(degraded).score == calculate_summary(healthy).score
    assert calculate_summary(degraded).scanner_breakdown["Red Team Simulator"] == {
        "critical": 0,
        "high": 0,
        "medium": 0,
        "info": 0,
    }


@pytest.mark.parametrize(
    ("names", "expected"),
    [
        ([], ["Secret Leak Scanner", "MCP Config Auditor", "Red Team Simulator"]),
        (["secret"], ["Secret Leak Scanner"]),
        (["MCP", "red team"], ["MCP Config Auditor", "Red Team Simulator"]),
        (["  "], ["Secret Leak Scanner", "MCP Config Auditor", "Red Team Simulator"]),
        (["nothing"], []),
    ],
)
def test_select_scanners_by_case_insensitive_substring(names: list[str], expected: list[str]) -> None:
    scanners = [_SecretScanner(), _ConfigScanner(), _BrokenScanner()]

    assert [scanner.name for scanner in select_scanners(scanners, names)] == expected
