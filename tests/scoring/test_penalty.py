"""Tests for the diminishing-returns penalty curve and interaction surcharge."""

from __future__ import annotations

import math

import pytest

from agentshield.config import DEFAULT_POLICY
from agentshield.scoring import diminishing_penalty, interaction_penalty, severity_penalty, total_penalty


@pytest.mark.parametrize(
    ("count", "base", "cap", "expected"),
    [
        (0, 20, 50, 0.0),
        (1, 20, 50, 20.0),
        (3, 20, 50, 40.0),
        (7, 20, 50, 50.0),
        (1, 5, 30, 5.0),
        (3, 5, 30, 10.0),
        (1, 1.5, 15, 1.5),
        (10, 0, 0, 0.0),
    ],
    ids=["zero", "one_critical", "three_critical", "critical_capped", "one_high", "three_high", "one_medium", "info"],
)
def test_diminishing_penalty_reference_points(count: float, base: float, cap: float, expected: float) -> None:
    assert diminishing_penalty(count, base, cap) == pytest.approx(expected)


def test_diminishing_penalty_negative_count_is_zero() -> None:
    assert diminishing_penalty(-1, 20, 50) == 0.0


def test_marginal_penalty_strictly_decreases() -> None:
    """Each additional finding costs less than the one before it."""
    previous_marginal = math.inf
    for count in range(1, 30):
        marginal = diminishing_penalty(count, 5, 1000) - diminishing_penalty(count - 1, 5, 1000)
        assert marginal < previous_marginal
        previous_marginal = marginal


@pytest.mark.parametrize(("severity", "cap"), [("critical", 50), ("high", 30), ("medium", 15)])
def test_penalty_approaches_cap_and_never_exceeds_it(severity: str, cap: float) -> None:
    curve = DEFAULT_POLICY.penalty_curve(severity)
    values = [diminishing_penalty(count, curve.base, curve.cap) for count in (1, 10, 100, 10_000, 10**9)]

    assert values == sorted(values)
    assert max(values) == cap


@pytest.mark.parametrize(
    ("critical", "high", "expected"),
    [
        (0, 0, 0.0),
        (0, 5, 0.0),
        (5, 0, 0.0),
        (1, 1, 5.0),
        (1, 3, 5.0),
        (3, 3, 10.0),
        (100, 100, 10.0),
    ],
)
def test_interaction_penalty_gating_and_cap(critical: float, high: float, expected: float) -> None:
    assert interaction_penalty(critical, high) == pytest.approx(expected)


def test_interaction_penalty_uses_weighted_operands() -> None:
    assert interaction_penalty(0.6, 1.0) == pytest.approx(5 * math.log2(1.6))


def test_interaction_penalty_respects_tuned_curve() -> None:
    assert interaction_penalty(1, 1, base=2, cap=1) == 1


def test_total_penalty_adds_interaction_to_severity_penalties() -> None:
    counts = {"critical": 1.0, "high": 1.0, "medium": 1.0, "info": 4.0}

    assert severity_penalty(counts, DEFAULT_POLICY) == pytest.approx(26.5)
    assert total_penalty(counts, DEFAULT_POLICY) == pytest.approx(31.5)


def test_total_penalty_is_bounded_by_caps() -> None:
    counts = {"critical": 1e6, "high": 1e6, "medium": 1e6, "info": 1e6}

    assert total_penalty(counts, DEFAULT_POLICY) == pytest.approx(50 + 30 + 15 + 10)
