"""AgentShield risk scoring package."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version

from agentshield.scoring import ScoringEngine, calculate_summary, score_to_grade

__all__ = ["ScoringEngine", "__version__", "calculate_summary", "score_to_grade"]

try:
    __version__ = version("agentshield")
except PackageNotFoundError:
    __version__ = "0.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
