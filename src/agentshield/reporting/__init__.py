"""Reporting package for AgentShield outputs."""

from __future__ import annotations

from .stdout import StdoutReporter
from .writer import build_report_payload, write_summary_report

__all__ = ["StdoutReporter", "build_report_payload", "write_summary_report"]
