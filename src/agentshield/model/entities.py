"""Frozen dataclasses for scanner findings and score summaries."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from agentshield.constants.scoring import CONFIDENCES, DEFAULT_CONFIDENCE, SEVERITIES
from agentshield.exceptions import ScanInputError
from agentshield.types import Confidence, JsonObject, Severity


def _optional_str(payload: Mapping[str, Any], key: str) -> str | None:
    value = payload.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ScanInputError(f"finding field `{key}` must be a string")
    return value


def _non_negative_number(payload: Mapping[str, Any], *keys: str) -> float:
    """Return the first present numeric field among *keys*, defaulting to 0."""
    for key in keys:
        value = payload.get(key)
        if value is None:
            continue
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
            raise ScanInputError(f"scan result field `{key}` must be a non-negative number")
        return value
    return 0


@dataclass(frozen=True)
class Finding:
    """One issue reported by a scanner.

    Only ``severity``, ``confidence`` and ``is_test_file`` take part in
    scoring. The remaining fields are passthrough for reporting.
    """

    id: str
    scanner: str
    severity: Severity
    title: str = ""
    description: str = ""
    recommendation: str = ""
    file: str | None = None
    line: int | None = None
    confidence: Confidence = "definite"
    is_test_file: bool = False

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any], *, scanner: str = "") -> Finding:
        """Build a finding from the producer JSON shape."""
        if not isinstance(payload, Mapping):
            raise ScanInputError(f"finding must be an object, got {type(payload).__name__}")

        severity = payload.get("severity")
        if severity not in SEVERITIES:
            raise ScanInputError(f"finding severity must be one of {list(SEVERITIES)}, got {severity!r}")

        confidence = payload.get("confidence")
        if confidence is None:
            confidence = DEFAULT_CONFIDENCE
        if confidence not in CONFIDENCES:
            raise ScanInputError(f"finding confidence must be one of {list(CONFIDENCES)}, got {confidence!r}")

        line = payload.get("line")
        if line is not None and (isinstance(line, bool) or not isinstance(line, int)):
            raise ScanInputError("finding field `line` must be an integer")

        is_test_file = payload.get("isTestFile", False)
        if not isinstance(is_test_file, bool):
            raise ScanInputError("finding field `isTestFile` must be a boolean")

        return cls(
            id=_optional_str(payload, "id") or "",
            scanner=_optional_str(payload, "scanner") or scanner,
            severity=severity,
            title=_optional_str(payload, "title") or "",
            description=_optional_str(payload, "description") or "",
            recommendation=_optional_str(payload, "recommendation") or "",
            file=_optional_str(payload, "file"),
            line=line,
            confidence=confidence,
            is_test_file=is_test_file,
        )

    def to_dict(self) -> JsonObject:
        """Serialize to the producer JSON shape."""
        payload: JsonObject = {
            "id": self.id,
            "scanner": self.scanner,
            "severity": self.severity,
            "title": self.title,
            "description": self.description,
            "recommendation": self.recommendation,
            "confidence": self.confidence,
        }
        if self.file is not None:
            payload["file"] = self.file
        if self.line is not None:
            payload["line"] = self.line
        if self.is_test_file:
            payload["isTestFile"] = True
        return payload


@dataclass(frozen=True)
class ScanResult:
    """One scanner's output for a single scan invocation."""

    scanner: str
    findings: tuple[Finding, ...] = ()
    files_scanned: int = 0
    duration: float = 0

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> ScanResult:
        """Build a scan result from JSON, accepting both file-count spellings."""
        if not isinstance(payload, Mapping):
            raise ScanInputError(f"scan result must be an object, got {type(payload).__name__}")

        scanner = payload.get("scanner")
        if not isinstance(scanner, str) or not scanner.strip():
            raise ScanInputError("scan result field `scanner` must be a non-empty string")

        raw_findings = payload.get("findings", [])
        if raw_findings is None:
            raw_findings = []
        if not isinstance(raw_findings, list):
            raise ScanInputError(f"scan result `findings` for {scanner!r} must be a list")

        files_scanned = _non_negative_number(payload, "filesScanned", "scannedFiles")
        return cls(
            scanner=scanner,
            findings=tuple(Finding.from_dict(item, scanner=scanner) for item in raw_findings),
            files_scanned=int(files_scanned),
            duration=_non_negative_number(payload, "duration"),
        )

    def to_dict(self) -> JsonObject:
        """Serialize to the producer JSON shape."""
        return {
            "scanner": self.scanner,
            "findings": [finding.to_dict() for finding in self.findings],
            "filesScanned": self.files_scanned,
            "duration": self.duration,
        }


@dataclass(frozen=True)
class DimensionScore:
    """Score, grade and scoring-finding count for one risk dimension."""

    score: int
    grade: str
    findings: int

    def to_dict(self) -> JsonObject:
        """Serialize to a JSON-compatible dict."""
        return {"score": self.score, "grade": self.grade, "findings": self.findings}


@dataclass(frozen=True)
class ReportSummary:
    """Aggregated scoring outcome for one scan invocation.

    Raw severity counts include findings excluded from scoring so that
    display totals stay complete; ``scoring_findings`` counts only those
    that entered the penalty model.
    """

    total_findings: int
    critical: int
    high: int
    medium: int
    info: int
    scoring_findings: int
    score: int
    grade: str
    scanned_files: int
    duration: float
    dimensions: Mapping[str, DimensionScore] = field(default_factory=dict)
    scanner_breakdown: Mapping[str, Mapping[str, int]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "dimensions", MappingProxyType(dict(self.dimensions)))
        object.__setattr__(
            self,
            "scanner_breakdown",
            MappingProxyType(
                {scanner: MappingProxyType(dict(counts)) for scanner, counts in self.scanner_breakdown.items()}
            ),
        )

    def to_dict(self) -> JsonObject:
        """Serialize using the report output contract keys."""
        return {
            "totalFindings": self.total_findings,
            "critical": self.critical,
            "high": self.high,
            "medium": self.medium,
            "info": self.info,
            "scoringFindings": self.scoring_findings,
            "score": self.score,
            "grade": self.grade,
            "scannedFiles": self.scanned_files,
            "duration": self.duration,
            "dimensions": {name: dimension.to_dict() for name, dimension in self.dimensions.items()},
            "scannerBreakdown": {
                scanner: dict(counts) for scanner, counts in self.scanner_breakdown.items()
            },
        }
