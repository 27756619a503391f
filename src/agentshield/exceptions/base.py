"""Root exception type."""

from __future__ import annotations


class AgentShieldError(Exception):
    """Base class for all AgentShield errors."""
