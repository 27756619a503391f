"""Config data model for AgentShield scoring."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from agentshield.constants.scoring import (
    CONFIDENCE_WEIGHT,
    DEFAULT_DIMENSION,
    DEFAULT_SCORING_MODE,
    DIMENSION_WEIGHTS,
    SCANNER_DIMENSIONS,
    SEVERITY_BASE_PENALTY,
    SEVERITY_MAX_PENALTY,
)
from agentshield.types import DEFAULT_INTERACTION, ExclusionPolicy, FloorRule, JsonObject, PenaltyCurve, ScoringMode


def _default_severity_penalties() -> Mapping[str, PenaltyCurve]:
    return MappingProxyType(
        {
            severity: PenaltyCurve(base=SEVERITY_BASE_PENALTY[severity], cap=SEVERITY_MAX_PENALTY[severity])
            for severity in SEVERITY_BASE_PENALTY
        }
    )


def frozen_mapping(values: Mapping[str, Any]) -> Mapping[str, Any]:
    """Return a read-only copy of *values* preserving insertion order."""
    return MappingProxyType(dict(values))


@dataclass(frozen=True)
class ScoringPolicy:
    """Immutable tuning tables consumed by the scoring engine.

    ``dimension_weights`` order is significant: it fixes both the order of
    reported dimensions and the summation order of the weighted composite.
    """

    mode: ScoringMode = DEFAULT_SCORING_MODE  # type: ignore[assignment]
    severity_penalties: Mapping[str, PenaltyCurve] = field(default_factory=_default_severity_penalties)
    confidence_weights: Mapping[str, float] = field(default_factory=lambda: CONFIDENCE_WEIGHT)
    interaction: PenaltyCurve = DEFAULT_INTERACTION
    floor: FloorRule = FloorRule()
    dimension_weights: Mapping[str, float] = field(default_factory=lambda: DIMENSION_WEIGHTS)
    scanner_dimensions: Mapping[str, str] = field(default_factory=lambda: SCANNER_DIMENSIONS)
    default_dimension: str = DEFAULT_DIMENSION
    exclusions: ExclusionPolicy = ExclusionPolicy()

    @property
    def dimensions(self) -> tuple[str, ...]:
        """Dimension names in declaration order."""
        return tuple(self.dimension_weights)

    def dimension_for(self, scanner: str) -> str:
        """Map a scanner name to its dimension, defaulting for unknown scanners."""
        return self.scanner_dimensions.get(scanner, self.default_dimension)

    def penalty_curve(self, severity: str) -> PenaltyCurve:
        """Return the penalty curve for *severity*, or a zero curve if untuned."""
        return self.severity_penalties.get(severity, PenaltyCurve(base=0.0, cap=0.0))

    def to_dict(self) -> JsonObject:
        """Serialize the effective policy for fingerprinting and diagnostics."""
        return {
            "mode": self.mode,
            "severity_penalties": {
                severity: {"base": curve.base, "cap": curve.cap}
                for severity, curve in self.severity_penalties.items()
            },
            "confidence_weights": dict(self.confidence_weights),
            "interaction": {"base": self.interaction.base, "cap": self.interaction.cap},
            "floor": {"threshold": self.floor.threshold, "margin": self.floor.margin},
            "dimensions": {
                "weights": dict(self.dimension_weights),
                "default": self.default_dimension,
                "scanners": dict(self.scanner_dimensions),
            },
            "exclusions": {
                "test_files": self.exclusions.exclude_test_files,
                "rules": [{"scanner": rule.scanner, "severity": rule.severity} for rule in self.exclusions.rules],
            },
        }


DEFAULT_POLICY: ScoringPolicy = ScoringPolicy()


@dataclass(frozen=True)
class AgentShieldConfig:
    """Resolved configuration."""

    scoring: ScoringPolicy = DEFAULT_POLICY
