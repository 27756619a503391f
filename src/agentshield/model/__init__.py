"""Core data models for AgentShield."""

from .entities import DimensionScore, Finding, ReportSummary, ScanResult

__all__ = [
    "DimensionScore",
    "Finding",
    "ReportSummary",
    "ScanResult",
]
