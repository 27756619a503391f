"""Score to letter-grade mapping."""

from __future__ import annotations

from agentshield.constants.scoring import FAILING_GRADE, GRADE_THRESHOLDS


def score_to_grade(score: float) -> str:
    """Map a 0-100 score to its letter grade.

    Thresholds are inclusive lower bounds checked from the top, so the
    mapping is total and monotonic for any numeric input.
    """
    for minimum, grade in GRADE_THRESHOLDS:
        if score >= minimum:
            return grade
    return FAILING_GRADE


def grade_order() -> tuple[str, ...]:
    """Return all grades from worst to best."""
    return (FAILING_GRADE, *(grade for _, grade in reversed(GRADE_THRESHOLDS)))
