"""Diminishing-returns severity penalties and the critical/high interaction surcharge."""

from __future__ import annotations

import math
from collections.abc import Mapping

from agentshield.config.model import ScoringPolicy
from agentshield.constants.scoring import (
    INTERACTION_BASE_PENALTY,
    INTERACTION_MAX_PENALTY,
    SEVERITIES,
)


def diminishing_penalty(effective_count: float, base: float, cap: float) -> float:
    """Return ``min(base * log2(count + 1), cap)``, or 0 when nothing was found.

    The first finding of a severity costs close to the full base; each further
    one costs less, and the total never exceeds *cap*.
    """
    if effective_count <= 0:
        return 0.0
    return min(base * math.log2(effective_count + 1), cap)


def interaction_penalty(
    critical: float,
    high: float,
    *,
    base: float = INTERACTION_BASE_PENALTY,
    cap: float = INTERACTION_MAX_PENALTY,
) -> float:
    """Extra penalty when critical and high findings coexist."""
    if critical > 0 and high > 0:
        return min(base * math.log2(min(critical, high) + 1), cap)
    return 0.0


def severity_penalty(counts: Mapping[str, float], policy: ScoringPolicy) -> float:
    """Sum per-severity penalties for confidence-weighted counts."""
    total = 0.0
    for severity in SEVERITIES:
        curve = policy.penalty_curve(severity)
        total += diminishing_penalty(counts.get(severity, 0.0), curve.base, curve.cap)
    return total


def total_penalty(counts: Mapping[str, float], policy: ScoringPolicy) -> float:
    """Severity penalties plus the interaction surcharge."""
    return severity_penalty(counts, policy) + interaction_penalty(
        counts.get("critical", 0.0),
        counts.get("high", 0.0),
        base=policy.interaction.base,
        cap=policy.interaction.cap,
    )
