"""Risk scoring and grading engine."""

from __future__ import annotations

from .dimensions import (
    build_dimension_score,
    classify_dimension,
    composite_score,
    floor_cap,
    round_half_up,
    score_from_findings,
)
from .engine import ScoringEngine, calculate_summary
from .exclusion import is_excluded_from_scoring, is_test_file_for_scoring
from .grades import grade_order, score_to_grade
from .penalty import diminishing_penalty, interaction_penalty, severity_penalty, total_penalty
from .weighting import confidence_weight, weighted_severity_counts

__all__ = [
    "ScoringEngine",
    "build_dimension_score",
    "calculate_summary",
    "classify_dimension",
    "composite_score",
    "confidence_weight",
    "diminishing_penalty",
    "floor_cap",
    "grade_order",
    "interaction_penalty",
    "is_excluded_from_scoring",
    "is_test_file_for_scoring",
    "round_half_up",
    "score_from_findings",
    "score_to_grade",
    "severity_penalty",
    "total_penalty",
    "weighted_severity_counts",
]
