"""Reference scoring tables.

These values only seed ``ScoringPolicy`` defaults. The engine always reads
the tables from the policy it was constructed with.
"""

from __future__ import annotations

from types import MappingProxyType

SEVERITIES: tuple[str, ...] = ("critical", "high", "medium", "info")
CONFIDENCES: tuple[str, ...] = ("definite", "likely", "possible")
DEFAULT_CONFIDENCE: str = "definite"

# (base, cap) per severity for the log2 diminishing-returns curve.
SEVERITY_BASE_PENALTY: MappingProxyType[str, float] = MappingProxyType(
    {"critical": 20.0, "high": 5.0, "medium": 1.5, "info": 0.0}
)
SEVERITY_MAX_PENALTY: MappingProxyType[str, float] = MappingProxyType(
    {"critical": 50.0, "high": 30.0, "medium": 15.0, "info": 0.0}
)

CONFIDENCE_WEIGHT: MappingProxyType[str, float] = MappingProxyType(
    {"definite": 1.0, "likely": 0.8, "possible": 0.6}
)

INTERACTION_BASE_PENALTY: float = 5.0
INTERACTION_MAX_PENALTY: float = 10.0

# Declaration order is also the summation order of the weighted composite.
DIMENSIONS: tuple[str, ...] = ("codeSafety", "configSafety", "defenseScore", "environmentSafety")
DEFAULT_DIMENSION: str = "codeSafety"
DIMENSION_WEIGHTS: MappingProxyType[str, float] = MappingProxyType(
    {
        "codeSafety": 0.35,
        "configSafety": 0.25,
        "defenseScore": 0.25,
        "environmentSafety": 0.15,
    }
)
DIMENSION_WEIGHT_TOLERANCE: float = 1e-6

SCANNER_DIMENSIONS: MappingProxyType[str, str] = MappingProxyType(
    {
        "Secret Leak Scanner": "codeSafety",
        "Prompt Injection Tester": "codeSafety",
        "Skill Auditor": "codeSafety",
        "MCP Config Auditor": "configSafety",
        "Permission Analyzer": "configSafety",
        "Channel Surface Auditor": "configSafety",
        "Defense Analyzer": "defenseScore",
        "Red Team Simulator": "defenseScore",
        "Environment Isolation Auditor": "environmentSafety",
    }
)

# Informational tiers that are low-signal heuristics, not actionable risk.
NON_SCORING_SCANNER_SEVERITIES: tuple[tuple[str, str], ...] = (("Secret Leak Scanner", "info"),)

MAX_SCORE: int = 100
MIN_SCORE: int = 0

FLOOR_THRESHOLD: int = 60
FLOOR_MARGIN: int = 10

# Inclusive lower bounds, highest first. Anything below the last bound is F.
GRADE_THRESHOLDS: tuple[tuple[int, str], ...] = (
    (97, "A+"),
    (93, "A"),
    (90, "A-"),
    (87, "B+"),
    (83, "B"),
    (80, "B-"),
    (77, "C+"),
    (73, "C"),
    (70, "C-"),
    (67, "D+"),
    (63, "D"),
    (60, "D-"),
)
FAILING_GRADE: str = "F"

SCORING_MODES: frozenset[str] = frozenset({"dimensional", "flat"})
DEFAULT_SCORING_MODE: str = "dimensional"
