"""Config file validation for AgentShield scoring."""

from __future__ import annotations

import difflib
import math
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml

from agentshield.constants.config import CONFIG_FILENAME
from agentshield.constants.scoring import (
    CONFIDENCES,
    DIMENSION_WEIGHT_TOLERANCE,
    DIMENSIONS,
    SCORING_MODES,
    SEVERITIES,
)
from agentshield.constants.validation import (
    ALLOWED_CONFIG_KEYS,
    ALLOWED_DIMENSION_KEYS,
    ALLOWED_EXCLUSION_KEYS,
    ALLOWED_EXCLUSION_RULE_KEYS,
    ALLOWED_FLOOR_KEYS,
    ALLOWED_PENALTY_KEYS,
    ALLOWED_SCORING_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
    CFG008,
)
from agentshield.exceptions.validation import ValidationError


class _Collector:
    """Accumulates validation errors for a single config file."""

    def __init__(self, path: str) -> None:
        self.path = path
        self.errors: list[ValidationError] = []

    def add(self, code: str, field: str, message: str, hint: str = "") -> None:
        self.errors.append(ValidationError(code=code, path=self.path, field=field, message=message, hint=hint))

    def mapping(self, value: Any, field: str) -> dict[str, Any] | None:
        """Return *value* if it is a mapping, recording CFG005 otherwise."""
        if value is None:
            return {}
        if not isinstance(value, dict):
            self.add(CFG005, field, f"`{field}` must be a mapping", hint=f"got {type(value).__name__}")
            return None
        return value

    def unknown_keys(self, raw: dict[str, Any], allowed: frozenset[str], prefix: str) -> None:
        for key in sorted(raw, key=str):
            if key not in allowed:
                field = f"{prefix}.{key}" if prefix else str(key)
                self.add(CFG004, field, f"unknown key `{key}`", hint=_suggest_key(str(key), allowed))

    def number(self, value: Any, field: str) -> float | None:
        if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
            self.add(CFG005, field, f"`{field}` must be a number", hint=f"got {value!r}")
            return None
        return float(value)


def validate_config_file(
    root: Path,
    config_path: Path | None = None,
    *,
    config_explicit: bool = False,
) -> list[ValidationError]:
    """Validate an agentshield.yaml file and return all validation errors.

    Collect-all counterpart of ``load_config``: it never raises, so
    ``agentshield validate-config`` can report every problem at once.
    """
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    collector = _Collector(str(path))

    if not path.exists():
        if config_explicit:
            collector.add(CFG001, "", f"config file not found: {path}")
        return collector.errors

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        collector.add(CFG002, "", f"invalid YAML: {exc}")
        return collector.errors

    if raw is None:
        return collector.errors
    if not isinstance(raw, dict):
        collector.add(CFG003, "", f"config must be a YAML mapping, got {type(raw).__name__}")
        return collector.errors

    collector.unknown_keys(raw, ALLOWED_CONFIG_KEYS, "")
    scoring = collector.mapping(raw.get("scoring"), "scoring")
    if scoring:
        _validate_scoring(collector, scoring)
    return collector.errors


def _validate_scoring(collector: _Collector, scoring: dict[str, Any]) -> None:
    collector.unknown_keys(scoring, ALLOWED_SCORING_KEYS, "scoring")

    if "mode" in scoring:
        mode = scoring["mode"]
        expected = f"expected one of: {', '.join(sorted(SCORING_MODES))}; got: {mode!r}"
        if not isinstance(mode, str):
            collector.add(CFG005, "scoring.mode", "`scoring.mode` must be a string", hint=expected)
        elif mode not in SCORING_MODES:
            collector.add(CFG006, "scoring.mode", "invalid value for `scoring.mode`", hint=expected)

    penalties = collector.mapping(scoring.get("severity_penalties"), "scoring.severity_penalties")
    for severity, curve in (penalties or {}).items():
        field = f"scoring.severity_penalties.{severity}"
        if severity not in SEVERITIES:
            collector.add(CFG006, field, f"unknown severity `{severity}`", hint=_suggest_key(str(severity), SEVERITIES))
            continue
        _validate_curve(collector, curve, field)

    if "interaction" in scoring:
        _validate_curve(collector, scoring["interaction"], "scoring.interaction")

    weights = collector.mapping(scoring.get("confidence_weights"), "scoring.confidence_weights")
    for confidence, weight in (weights or {}).items():
        field = f"scoring.confidence_weights.{confidence}"
        if confidence not in CONFIDENCES:
            collector.add(
                CFG006, field, f"unknown confidence `{confidence}`", hint=_suggest_key(str(confidence), CONFIDENCES)
            )
            continue
        value = collector.number(weight, field)
        if value is not None and not 0 < value <= 1:
            collector.add(CFG007, field, f"`{field}` must be in (0, 1]", hint=f"got {value:g}")

    floor = collector.mapping(scoring.get("floor"), "scoring.floor")
    if floor:
        collector.unknown_keys(floor, ALLOWED_FLOOR_KEYS, "scoring.floor")
        for key in ("threshold", "margin"):
            if key in floor:
                value = floor[key]
                if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                    collector.add(CFG005, f"scoring.floor.{key}", f"`scoring.floor.{key}` must be a non-negative integer")

    dimensions = collector.mapping(scoring.get("dimensions"), "scoring.dimensions")
    if dimensions:
        _validate_dimensions(collector, dimensions)

    exclusions = collector.mapping(scoring.get("exclusions"), "scoring.exclusions")
    if exclusions:
        _validate_exclusions(collector, exclusions)


def _validate_curve(collector: _Collector, value: Any, field: str) -> None:
    curve = collector.mapping(value, field)
    if not curve:
        return
    collector.unknown_keys(curve, ALLOWED_PENALTY_KEYS, field)
    for key in ("base", "cap"):
        if key in curve:
            number = collector.number(curve[key], f"{field}.{key}")
            if number is not None and number < 0:
                collector.add(CFG007, f"{field}.{key}", f"`{field}.{key}` must be non-negative")


def _validate_dimensions(collector: _Collector, dimensions: dict[str, Any]) -> None:
    collector.unknown_keys(dimensions, ALLOWED_DIMENSION_KEYS, "scoring.dimensions")

    known: tuple[str, ...] = DIMENSIONS
    raw_weights = dimensions.get("weights")
    weights = collector.mapping(raw_weights, "scoring.dimensions.weights")
    if isinstance(raw_weights, dict) and not raw_weights:
        collector.add(
            CFG005, "scoring.dimensions.weights", "`scoring.dimensions.weights` must name at least one dimension"
        )
    elif weights:
        numbers = [collector.number(value, f"scoring.dimensions.weights.{name}") for name, value in weights.items()]
        for name, number in zip(weights, numbers):
            if number is not None and number < 0:
                field = f"scoring.dimensions.weights.{name}"
                collector.add(CFG007, field, f"`{field}` must be non-negative", hint=f"got {number:g}")
        valid = [number for number in numbers if number is not None]
        if len(valid) == len(numbers):
            total = math.fsum(valid)
            if abs(total - 1.0) > DIMENSION_WEIGHT_TOLERANCE:
                collector.add(CFG008, "scoring.dimensions.weights", "dimension weights must sum to 1.0", hint=f"got {total:g}")
        known = tuple(str(name) for name in weights)

    if "default" in dimensions and dimensions["default"] not in known:
        collector.add(
            CFG006,
            "scoring.dimensions.default",
            "invalid value for `scoring.dimensions.default`",
            hint=f"expected one of: {', '.join(known)}; got: {dimensions['default']!r}",
        )

    scanners = collector.mapping(dimensions.get("scanners"), "scoring.dimensions.scanners")
    for scanner, dimension in sorted((scanners or {}).items(), key=lambda item: str(item[0])):
        if dimension not in known:
            collector.add(
                CFG006,
                f"scoring.dimensions.scanners.{scanner}",
                f"unknown dimension for scanner `{scanner}`",
                hint=_suggest_key(str(dimension), known),
            )


def _validate_exclusions(collector: _Collector, exclusions: dict[str, Any]) -> None:
    collector.unknown_keys(exclusions, ALLOWED_EXCLUSION_KEYS, "scoring.exclusions")
    if "test_files" in exclusions and not isinstance(exclusions["test_files"], bool):
        collector.add(CFG005, "scoring.exclusions.test_files", "`scoring.exclusions.test_files` must be a boolean")

    rules = exclusions.get("rules")
    if rules is None:
        return
    if not isinstance(rules, list):
        collector.add(CFG005, "scoring.exclusions.rules", "`scoring.exclusions.rules` must be a list")
        return
    for index, rule in enumerate(rules):
        field = f"scoring.exclusions.rules[{index}]"
        rule_map = collector.mapping(rule, field)
        if rule_map is None:
            continue
        collector.unknown_keys(rule_map, ALLOWED_EXCLUSION_RULE_KEYS, field)
        scanner = rule_map.get("scanner")
        if not isinstance(scanner, str) or not scanner.strip():
            collector.add(CFG005, f"{field}.scanner", "`scanner` must be a non-empty string")
        if rule_map.get("severity") not in SEVERITIES:
            collector.add(
                CFG006,
                f"{field}.severity",
                "invalid value for `severity`",
                hint=f"expected one of: {', '.join(SEVERITIES)}; got: {rule_map.get('severity')!r}",
            )


def _suggest_key(key: str, allowed: Iterable[str]) -> str:
    """Return a 'did you mean' hint for a misspelled key, or empty string."""
    matches = difflib.get_close_matches(key, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
