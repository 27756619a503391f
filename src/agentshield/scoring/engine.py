"""Risk scoring engine: scanner results in, report summary out."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable

from agentshield.config.model import DEFAULT_POLICY, ScoringPolicy
from agentshield.constants.scoring import SEVERITIES
from agentshield.model import Finding, ReportSummary, ScanResult
from agentshield.scoring.dimensions import (
    build_dimension_score,
    classify_dimension,
    composite_score,
    score_from_findings,
)
from agentshield.scoring.exclusion import is_excluded_from_scoring
from agentshield.scoring.grades import score_to_grade

logger = logging.getLogger(__name__)


class ScoringEngine:
    """Aggregate findings from any number of scanners into a ``ReportSummary``.

    The engine is stateless apart from its policy. ``calculate_summary`` is a
    pure function of the finding multiset: result order, duplicate scanner
    names and finding order do not change the outcome.
    """

    def __init__(self, policy: ScoringPolicy = DEFAULT_POLICY) -> None:
        self._policy = policy

    @property
    def policy(self) -> ScoringPolicy:
        return self._policy

    def calculate_summary(self, results: Iterable[ScanResult]) -> ReportSummary:
        """Score scan results and build the summary."""
        policy = self._policy
        raw_counts: Counter[str] = Counter()
        scanned_files = 0
        duration: float = 0
        scoring_findings: list[Finding] = []
        dimension_findings: dict[str, list[Finding]] = {name: [] for name in policy.dimensions}
        scanner_breakdown: dict[str, dict[str, int]] = {}

        for result in results:
            scanned_files += result.files_scanned
            duration += result.duration
            breakdown = scanner_breakdown.setdefault(result.scanner, dict.fromkeys(SEVERITIES, 0))
            dimension = classify_dimension(result.scanner, policy)

            for finding in result.findings:
                raw_counts[finding.severity] += 1
                breakdown[finding.severity] += 1
                if is_excluded_from_scoring(finding, result.scanner, policy.exclusions):
                    continue
                scoring_findings.append(finding)
                dimension_findings[dimension].append(finding)

        total_findings = sum(raw_counts[severity] for severity in SEVERITIES)
        excluded = total_findings - len(scoring_findings)
        if excluded:
            logger.debug("Excluded %d of %d findings from scoring", excluded, total_findings)

        dimensions = {
            name: build_dimension_score(dimension_findings[name], policy) for name in policy.dimensions
        }
        score = score_from_findings(scoring_findings, policy)
        if policy.mode == "dimensional" and scoring_findings:
            score = composite_score({name: dim.score for name, dim in dimensions.items()}, policy)

        return ReportSummary(
            total_findings=total_findings,
            critical=raw_counts["critical"],
            high=raw_counts["high"],
            medium=raw_counts["medium"],
            info=raw_counts["info"],
            scoring_findings=len(scoring_findings),
            score=score,
            grade=score_to_grade(score),
            scanned_files=scanned_files,
            duration=duration,
            dimensions=dimensions,
            scanner_breakdown=scanner_breakdown,
        )


def calculate_summary(results: Iterable[ScanResult], policy: ScoringPolicy | None = None) -> ReportSummary:
    """Score *results* with *policy* (reference policy when omitted)."""
    return ScoringEngine(policy if policy is not None else DEFAULT_POLICY).calculate_summary(results)
