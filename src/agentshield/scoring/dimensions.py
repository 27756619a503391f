"""Per-dimension scoring and the weakest-link composite."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping, Sequence

from agentshield.config.model import ScoringPolicy
from agentshield.constants.scoring import MAX_SCORE, MIN_SCORE
from agentshield.model import DimensionScore, Finding
from agentshield.scoring.grades import score_to_grade
from agentshield.scoring.penalty import total_penalty
from agentshield.scoring.weighting import weighted_severity_counts

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with ties going up (82.5 -> 83)."""
    return math.floor(value + 0.5)


def clamp_score(value: float) -> int:
    """Round and clamp a raw score into ``[MIN_SCORE, MAX_SCORE]``."""
    return max(MIN_SCORE, min(MAX_SCORE, round_half_up(value)))


def score_from_findings(findings: Iterable[Finding], policy: ScoringPolicy) -> int:
    """Score a set of scoring findings as ``100 - penalty``.

    Dimension-agnostic: used for every dimension and for the flat score.
    """
    counts = weighted_severity_counts(findings, policy.confidence_weights)
    return clamp_score(MAX_SCORE - total_penalty(counts, policy))


def classify_dimension(scanner: str, policy: ScoringPolicy) -> str:
    """Return the dimension that owns findings from *scanner*.

    Scanners mapped to a dimension the policy does not weight fall back to
    the default dimension, so every scoring finding lands in a reported bucket.
    """
    dimension = policy.dimension_for(scanner)
    if dimension in policy.dimension_weights:
        return dimension
    return policy.default_dimension


def build_dimension_score(findings: Sequence[Finding], policy: ScoringPolicy) -> DimensionScore:
    score = score_from_findings(findings, policy)
    return DimensionScore(score=score, grade=score_to_grade(score), findings=len(findings))


def floor_cap(min_dimension_score: int, policy: ScoringPolicy) -> float:
    """Ceiling imposed by the worst dimension, or infinity when none is failing."""
    if min_dimension_score < policy.floor.threshold:
        return min_dimension_score + policy.floor.margin
    return math.inf


def composite_score(dimension_scores: Mapping[str, int], policy: ScoringPolicy) -> int:
    """Weighted dimension average, capped by the weakest dimension.

    Summation follows ``policy.dimensions`` order so results are bit-for-bit
    reproducible. The floor cap only ever lowers the weighted value.
    """
    weighted_sum = 0.0
    for name in policy.dimensions:
        weighted_sum += dimension_scores[name] * policy.dimension_weights[name]
    weighted = clamp_score(weighted_sum)

    min_dimension = min(dimension_scores[name] for name in policy.dimensions)
    cap = floor_cap(min_dimension, policy)
    if weighted > cap:
        logger.debug("Floor rule capped composite %d at %s (min dimension %d)", weighted, cap, min_dimension)
    return int(min(weighted, cap))
