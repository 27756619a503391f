"""Scanner-result input exceptions."""

from __future__ import annotations

from agentshield.exceptions.base import AgentShieldError


class ScanInputError(AgentShieldError, ValueError):
    """Raised when a scanner result payload violates the producer contract."""
