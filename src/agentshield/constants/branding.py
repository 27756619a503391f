"""Branding strings for CLI and report output."""

from __future__ import annotations

CLI_DESCRIPTION: str = (
    "AgentShield risk scoring: turn scanner findings into a composite score, "
    "letter grade, and per-dimension sub-scores."
)
REPORT_TITLE: str = "AgentShield Security Report"
