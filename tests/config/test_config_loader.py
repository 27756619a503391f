"""Tests for agentshield.yaml loading and policy normalization."""

from __future__ import annotations

from pathlib import Path

import pytest

from agentshield.config import DEFAULT_POLICY, build_scoring_policy, load_config
from agentshield.exceptions import ConfigError
from agentshield.types import ExclusionRule, PenaltyCurve


def _write_config(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "agentshield.yaml"
    path.write_text(content, encoding="utf-8")
    return path


def test_missing_default_config_uses_reference_policy(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert config.scoring == DEFAULT_POLICY


def test_missing_explicit_config_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Config file not found"):
        load_config(tmp_path, tmp_path / "nope.yaml")


def test_empty_config_file_uses_reference_policy(tmp_path: Path) -> None:
    _write_config(tmp_path, "")

    assert load_config(tmp_path).scoring == DEFAULT_POLICY


def test_invalid_yaml_raises_config_error(tmp_path: Path) -> None:
    _write_config(tmp_path, "scoring: [unclosed\n")

    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_config(tmp_path)


def test_non_mapping_root_raises(tmp_path: Path) -> None:
    _write_config(tmp_path, "- just\n- a list\n")

    with pytest.raises(ConfigError, match="must be a YAML mapping"):
        load_config(tmp_path)


def test_partial_overrides_merge_over_reference_policy(tmp_path: Path) -> None:
    _write_config(
        tmp_path,
        "scoring:\n"
        "  mode: flat\n"
        "  severity_penalties:\n"
        "    info:\n"
        "      base: 0.5\n"
        "      cap: 5\n"
        "    critical:\n"
        "      cap: 60\n"
        "  confidence_weights:\n"
        "    possible: 0.5\n"
        "  floor:\n"
        "    threshold: 50\n",
    )

    policy = load_config(tmp_path).scoring

    assert policy.mode == "flat"
    assert policy.penalty_curve("info") == PenaltyCurve(base=0.5, cap=5.0)
    assert policy.penalty_curve("critical") == PenaltyCurve(base=20.0, cap=60.0)
    assert policy.penalty_curve("high") == DEFAULT_POLICY.penalty_curve("high")
    assert policy.confidence_weights["possible"] == 0.5
    assert policy.confidence_weights["likely"] == 0.8
    assert policy.floor.threshold == 50
    assert policy.floor.margin == 10


def test_explicit_config_path_outside_root(tmp_path: Path) -> None:
    other = tmp_path / "elsewhere"
    other.mkdir()
    path = other / "custom.yaml"
    path.write_text("scoring:\n  interaction:\n    base: 3\n", encoding="utf-8")

    policy = load_config(tmp_path, path).scoring

    assert policy.interaction == PenaltyCurve(base=3.0, cap=10.0)


def test_dimension_weights_replace_the_table_in_declared_order() -> None:
    policy = build_scoring_policy(
        {
            "dimensions": {
                "weights": {"runtime": 0.4, "supplyChain": 0.6},
                "default": "runtime",
                "scanners": {"Dependency Auditor": "supplyChain"},
            }
        }
    )

    assert policy.dimensions == ("runtime", "supplyChain")
    assert policy.default_dimension == "runtime"
    assert policy.dimension_for("Dependency Auditor") == "supplyChain"
    assert policy.dimension_for("Unknown") == "runtime"


def test_dimension_weights_must_sum_to_one() -> None:
    with pytest.raises(ConfigError, match="must sum to 1.0"):
        build_scoring_policy({"dimensions": {"weights": {"codeSafety": 0.5, "configSafety": 0.4}}})


def test_default_dimension_must_be_weighted() -> None:
    with pytest.raises(ConfigError, match="scoring.dimensions.default"):
        build_scoring_policy({"dimensions": {"weights": {"runtime": 1.0}}})


def test_scanner_dimension_must_be_weighted() -> None:
    with pytest.raises(ConfigError, match="scoring.dimensions.scanners.Alpha"):
        build_scoring_policy({"dimensions": {"scanners": {"Alpha": "nowhere"}}})


@pytest.mark.parametrize(
    ("raw", "match"),
    [
        ({"mode": "weighted"}, "scoring.mode"),
        ({"severity_penalties": {"severe": {"base": 1}}}, "unknown severity"),
        ({"severity_penalties": {"high": {"base": -1}}}, "non-negative"),
        ({"severity_penalties": {"high": {"base": "lots"}}}, "must be a number"),
        ({"confidence_weights": {"maybe": 0.5}}, "unknown confidence"),
        ({"confidence_weights": {"possible": 0}}, r"must be in \(0, 1\]"),
        ({"confidence_weights": {"likely": 1.5}}, r"must be in \(0, 1\]"),
        ({"floor": {"threshold": -5}}, "non-negative integer"),
        ({"floor": {"margin": True}}, "non-negative integer"),
        ({"interaction": [1, 2]}, "must be a mapping"),
        ({"exclusions": {"test_files": "yes"}}, "must be a boolean"),
        ({"exclusions": {"rules": {"scanner": "x"}}}, "must be a list"),
        ({"exclusions": {"rules": [{"scanner": "", "severity": "info"}]}}, "non-empty string"),
        ({"exclusions": {"rules": [{"scanner": "A", "severity": "low"}]}}, "severity must be one of"),
    ],
    ids=[
        "mode",
        "severity_name",
        "negative_base",
        "non_numeric_base",
        "confidence_name",
        "zero_weight",
        "weight_above_one",
        "negative_threshold",
        "bool_margin",
        "interaction_type",
        "test_files_type",
        "rules_type",
        "rule_scanner",
        "rule_severity",
    ],
)
def test_invalid_scoring_values_raise(raw: dict, match: str) -> None:
    with pytest.raises(ConfigError, match=match):
        build_scoring_policy(raw)


def test_exclusion_rules_replace_reference_rules() -> None:
    policy = build_scoring_policy(
        {"exclusions": {"test_files": False, "rules": [{"scanner": "Red Team Simulator", "severity": "medium"}]}}
    )

    assert policy.exclusions.exclude_test_files is False
    assert policy.exclusions.rules == (ExclusionRule(scanner="Red Team Simulator", severity="medium"),)


def test_omitted_exclusion_rules_keep_reference_rules() -> None:
    policy = build_scoring_policy({"exclusions": {"test_files": False}})

    assert policy.exclusions.rules == DEFAULT_POLICY.exclusions.rules


def test_loaded_policy_is_read_only(tmp_path: Path) -> None:
    _write_config(tmp_path, "scoring:\n  confidence_weights:\n    likely: 0.7\n")

    policy = load_config(tmp_path).scoring

    with pytest.raises(TypeError):
        policy.confidence_weights["likely"] = 1.0  # type: ignore[index]
