"""Configuration-related exceptions."""

from __future__ import annotations

from agentshield.exceptions.base import AgentShieldError


class ConfigError(AgentShieldError, ValueError):
    """Raised when scoring configuration is invalid."""
