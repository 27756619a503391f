"""Stable validation error codes and allowed-key sets for config validation."""

from __future__ import annotations

CFG001: str = "CFG001"  # config file not found (explicit --config)
CFG002: str = "CFG002"  # invalid YAML parse
CFG003: str = "CFG003"  # top-level value is not a mapping
CFG004: str = "CFG004"  # unknown key
CFG005: str = "CFG005"  # invalid value type
CFG006: str = "CFG006"  # invalid enum value
CFG007: str = "CFG007"  # value out of range
CFG008: str = "CFG008"  # dimension weights do not sum to 1

ALL_CFG_CODES: tuple[str, ...] = (CFG001, CFG002, CFG003, CFG004, CFG005, CFG006, CFG007, CFG008)

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset({"scoring"})

ALLOWED_SCORING_KEYS: frozenset[str] = frozenset(
    {
        "mode",
        "severity_penalties",
        "confidence_weights",
        "interaction",
        "floor",
        "dimensions",
        "exclusions",
    }
)

ALLOWED_PENALTY_KEYS: frozenset[str] = frozenset({"base", "cap"})
ALLOWED_FLOOR_KEYS: frozenset[str] = frozenset({"threshold", "margin"})
ALLOWED_DIMENSION_KEYS: frozenset[str] = frozenset({"weights", "default", "scanners"})
ALLOWED_EXCLUSION_KEYS: frozenset[str] = frozenset({"test_files", "rules"})
ALLOWED_EXCLUSION_RULE_KEYS: frozenset[str] = frozenset({"scanner", "severity"})
