"""Configuration loading, validation, and normalization for AgentShield scoring."""

from __future__ import annotations

from agentshield.config.fingerprint import config_fingerprint
from agentshield.config.loader import build_scoring_policy, load_config
from agentshield.config.model import DEFAULT_POLICY, AgentShieldConfig, ScoringPolicy
from agentshield.config.validator import validate_config_file

__all__ = [
    "DEFAULT_POLICY",
    "AgentShieldConfig",
    "ScoringPolicy",
    "build_scoring_policy",
    "config_fingerprint",
    "load_config",
    "validate_config_file",
]
