"""Config loading and normalization for AgentShield scoring."""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from agentshield.config.model import DEFAULT_POLICY, AgentShieldConfig, ScoringPolicy, frozen_mapping
from agentshield.constants.config import CONFIG_FILENAME
from agentshield.constants.scoring import (
    CONFIDENCES,
    DIMENSION_WEIGHT_TOLERANCE,
    SCORING_MODES,
    SEVERITIES,
)
from agentshield.exceptions import ConfigError
from agentshield.types import ExclusionPolicy, ExclusionRule, FloorRule, PenaltyCurve

logger = logging.getLogger(__name__)


def load_config(root: Path, config_path: Path | None = None) -> AgentShieldConfig:
    """Load and validate scoring config from ``agentshield.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return AgentShieldConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    logger.debug("Loaded config from %s", path)
    return AgentShieldConfig(scoring=build_scoring_policy(_ensure_mapping(raw.get("scoring"), "scoring")))


def build_scoring_policy(raw: Mapping[str, Any]) -> ScoringPolicy:
    """Merge a raw ``scoring`` block over the reference policy."""
    base = DEFAULT_POLICY

    mode = raw.get("mode", base.mode)
    if not isinstance(mode, str) or mode not in SCORING_MODES:
        raise ConfigError(f"scoring.mode must be one of {sorted(SCORING_MODES)}, got {mode!r}")

    severity_penalties = dict(base.severity_penalties)
    for severity, curve_raw in _ensure_mapping(raw.get("severity_penalties"), "scoring.severity_penalties").items():
        if severity not in SEVERITIES:
            raise ConfigError(f"scoring.severity_penalties has unknown severity {severity!r}")
        severity_penalties[severity] = _build_curve(
            curve_raw, f"scoring.severity_penalties.{severity}", severity_penalties[severity]
        )

    confidence_weights = dict(base.confidence_weights)
    for confidence, weight in _ensure_mapping(raw.get("confidence_weights"), "scoring.confidence_weights").items():
        if confidence not in CONFIDENCES:
            raise ConfigError(f"scoring.confidence_weights has unknown confidence {confidence!r}")
        value = _ensure_number(weight, f"scoring.confidence_weights.{confidence}")
        if not 0 < value <= 1:
            raise ConfigError(f"scoring.confidence_weights.{confidence} must be in (0, 1], got {value}")
        confidence_weights[confidence] = value

    interaction = _build_curve(raw.get("interaction"), "scoring.interaction", base.interaction)

    floor_raw = _ensure_mapping(raw.get("floor"), "scoring.floor")
    floor = FloorRule(
        threshold=_ensure_int(floor_raw.get("threshold", base.floor.threshold), "scoring.floor.threshold"),
        margin=_ensure_int(floor_raw.get("margin", base.floor.margin), "scoring.floor.margin"),
    )

    dimensions_raw = _ensure_mapping(raw.get("dimensions"), "scoring.dimensions")
    dimension_weights = _build_dimension_weights(dimensions_raw.get("weights"), base)
    default_dimension = dimensions_raw.get("default", base.default_dimension)
    if not isinstance(default_dimension, str) or default_dimension not in dimension_weights:
        raise ConfigError(
            f"scoring.dimensions.default must be one of {list(dimension_weights)}, got {default_dimension!r}"
        )
    scanner_dimensions = dict(base.scanner_dimensions)
    for scanner, dimension in _ensure_mapping(dimensions_raw.get("scanners"), "scoring.dimensions.scanners").items():
        if not isinstance(dimension, str) or dimension not in dimension_weights:
            raise ConfigError(
                f"scoring.dimensions.scanners.{scanner} must be one of {list(dimension_weights)}, got {dimension!r}"
            )
        scanner_dimensions[str(scanner)] = dimension

    return ScoringPolicy(
        mode=mode,  # type: ignore[arg-type]
        severity_penalties=frozen_mapping(severity_penalties),
        confidence_weights=frozen_mapping(confidence_weights),
        interaction=interaction,
        floor=floor,
        dimension_weights=frozen_mapping(dimension_weights),
        scanner_dimensions=frozen_mapping(scanner_dimensions),
        default_dimension=default_dimension,
        exclusions=_build_exclusions(_ensure_mapping(raw.get("exclusions"), "scoring.exclusions"), base),
    )


def _ensure_mapping(value: Any, key_name: str) -> dict[str, Any]:
    """Coerce a value to a mapping, treating ``None`` as empty."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"{key_name} must be a mapping")
    return value


def _ensure_number(value: Any, key_name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        raise ConfigError(f"{key_name} must be a number")
    return float(value)


def _ensure_int(value: Any, key_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigError(f"{key_name} must be a non-negative integer")
    return value


def _build_curve(value: Any, key_name: str, default: PenaltyCurve) -> PenaltyCurve:
    """Build a penalty curve, keeping unspecified fields from *default*."""
    raw = _ensure_mapping(value, key_name)
    base = _ensure_number(raw.get("base", default.base), f"{key_name}.base")
    cap = _ensure_number(raw.get("cap", default.cap), f"{key_name}.cap")
    if base < 0 or cap < 0:
        raise ConfigError(f"{key_name} base and cap must be non-negative")
    return PenaltyCurve(base=base, cap=cap)


def _build_dimension_weights(value: Any, base: ScoringPolicy) -> dict[str, float]:
    """Replace the dimension weight table when given; weights must sum to 1."""
    if value is None:
        return dict(base.dimension_weights)
    raw = _ensure_mapping(value, "scoring.dimensions.weights")
    if not raw:
        raise ConfigError("scoring.dimensions.weights must name at least one dimension")
    weights: dict[str, float] = {}
    for name, weight in raw.items():
        number = _ensure_number(weight, f"scoring.dimensions.weights.{name}")
        if number < 0:
            raise ConfigError(f"scoring.dimensions.weights.{name} must be non-negative")
        weights[str(name)] = number
    total = math.fsum(weights.values())
    if abs(total - 1.0) > DIMENSION_WEIGHT_TOLERANCE:
        raise ConfigError(f"scoring.dimensions.weights must sum to 1.0, got {total:g}")
    return weights


def _build_exclusions(raw: dict[str, Any], base: ScoringPolicy) -> ExclusionPolicy:
    test_files = raw.get("test_files", base.exclusions.exclude_test_files)
    if not isinstance(test_files, bool):
        raise ConfigError("scoring.exclusions.test_files must be a boolean")

    rules_raw = raw.get("rules")
    if rules_raw is None:
        return ExclusionPolicy(rules=base.exclusions.rules, exclude_test_files=test_files)
    if not isinstance(rules_raw, list):
        raise ConfigError("scoring.exclusions.rules must be a list")

    rules: list[ExclusionRule] = []
    for index, item in enumerate(rules_raw):
        key_name = f"scoring.exclusions.rules[{index}]"
        if not isinstance(item, dict):
            raise ConfigError(f"{key_name} must be a mapping")
        scanner = item.get("scanner")
        severity = item.get("severity")
        if not isinstance(scanner, str) or not scanner.strip():
            raise ConfigError(f"{key_name}.scanner must be a non-empty string")
        if severity not in SEVERITIES:
            raise ConfigError(f"{key_name}.severity must be one of {list(SEVERITIES)}, got {severity!r}")
        rules.append(ExclusionRule(scanner=scanner, severity=severity))
    return ExclusionPolicy(rules=tuple(rules), exclude_test_files=test_files)
