"""Confidence weighting of findings into effective severity counts."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from agentshield.constants.scoring import DEFAULT_CONFIDENCE, SEVERITIES
from agentshield.model import Finding


def confidence_weight(confidence: str | None, weights: Mapping[str, float]) -> float:
    """Return the scoring weight for a confidence level (``None`` means definite)."""
    return weights[confidence or DEFAULT_CONFIDENCE]


def weighted_severity_counts(findings: Iterable[Finding], weights: Mapping[str, float]) -> dict[str, float]:
    """Sum confidence weights per severity.

    Three ``possible`` highs yield an effective high count of ``1.8``, not 3.
    Every severity key is present even when zero.
    """
    counts = dict.fromkeys(SEVERITIES, 0.0)
    for finding in findings:
        counts[finding.severity] += confidence_weight(finding.confidence, weights)
    return counts
