"""Shared exception hierarchy for AgentShield."""

from __future__ import annotations

from .base import AgentShieldError
from .config import ConfigError
from .input import ScanInputError

__all__ = [
    "AgentShieldError",
    "ConfigError",
    "ScanInputError",
]
