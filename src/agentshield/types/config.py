"""Typed configuration structures for scoring policy settings."""

from __future__ import annotations

from dataclasses import dataclass

from agentshield.constants.scoring import (
    FLOOR_MARGIN,
    FLOOR_THRESHOLD,
    INTERACTION_BASE_PENALTY,
    INTERACTION_MAX_PENALTY,
    NON_SCORING_SCANNER_SEVERITIES,
)
from agentshield.types.common import Severity


@dataclass(frozen=True)
class PenaltyCurve:
    """Base multiplier and hard cap for a ``base * log2(n + 1)`` penalty."""

    base: float
    cap: float


@dataclass(frozen=True)
class FloorRule:
    """Weakest-link ceiling applied to the weighted composite."""

    threshold: int = FLOOR_THRESHOLD
    margin: int = FLOOR_MARGIN


@dataclass(frozen=True)
class ExclusionRule:
    """Findings of ``severity`` from ``scanner`` never enter scoring."""

    scanner: str
    severity: Severity

    def matches(self, scanner: str, severity: str) -> bool:
        """Return whether this rule covers the scanner/severity pair."""
        return self.scanner == scanner and self.severity == severity


@dataclass(frozen=True)
class ExclusionPolicy:
    """Declarative predicate deciding which findings are display-only."""

    rules: tuple[ExclusionRule, ...] = tuple(
        ExclusionRule(scanner=scanner, severity=severity)  # type: ignore[arg-type]
        for scanner, severity in NON_SCORING_SCANNER_SEVERITIES
    )
    exclude_test_files: bool = True

    def excludes(self, *, scanner: str, severity: str, is_test_file: bool) -> bool:
        """Return whether a finding with these attributes is excluded from scoring."""
        if self.exclude_test_files and is_test_file:
            return True
        return any(rule.matches(scanner, severity) for rule in self.rules)


DEFAULT_INTERACTION: PenaltyCurve = PenaltyCurve(base=INTERACTION_BASE_PENALTY, cap=INTERACTION_MAX_PENALTY)
