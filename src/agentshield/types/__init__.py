"""Shared type aliases for AgentShield."""

from .common import Confidence, JsonObject, JsonScalar, JsonValue, ScoringMode, Severity
from .config import DEFAULT_INTERACTION, ExclusionPolicy, ExclusionRule, FloorRule, PenaltyCurve

__all__ = [
    "DEFAULT_INTERACTION",
    "Confidence",
    "ExclusionPolicy",
    "ExclusionRule",
    "FloorRule",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "PenaltyCurve",
    "ScoringMode",
    "Severity",
]
