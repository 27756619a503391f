"""Plain-text stdout reporter for score summaries."""

from __future__ import annotations

from collections.abc import Sequence

from agentshield.constants.branding import REPORT_TITLE
from agentshield.constants.reporting import (
    ANSI_BOLD,
    ANSI_GREEN,
    ANSI_RED,
    ANSI_RESET,
    ANSI_YELLOW,
    BREAKDOWN_DEFAULT_LIMIT,
    GOOD_SCORE_MIN,
    PASSING_SCORE_MIN,
    SEVERITY_COLORS,
)
from agentshield.constants.scoring import SEVERITIES
from agentshield.model import Finding, ReportSummary, ScanResult


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


def _score_color(score: int) -> str:
    if score >= GOOD_SCORE_MIN:
        return ANSI_GREEN
    if score >= PASSING_SCORE_MIN:
        return ANSI_YELLOW
    return ANSI_RED


class StdoutReporter:
    """Formats a ``ReportSummary`` as human-readable stdout output."""

    def __init__(
        self,
        summary: ReportSummary,
        *,
        color: bool = True,
        verbose: bool = False,
        fingerprint: str | None = None,
        breakdown_limit: int = BREAKDOWN_DEFAULT_LIMIT,
        results: Sequence[ScanResult] | None = None,
    ) -> None:
        self._summary = summary
        self._color = color
        self._verbose = verbose
        self._fingerprint = fingerprint
        self._breakdown_limit = breakdown_limit
        self._results = results

    def render(self) -> str:
        """Render the full stdout report as a single string."""
        sections = [self._render_header()]
        if self._results is not None:
            sections.append(self._render_findings())
        sections.append(self._render_dimensions())
        if self._verbose:
            sections.append(self._render_breakdown())
        sections.append(self._render_notes())
        return "\n".join(section for section in sections if section)

    def _paint(self, text: str, color: str) -> str:
        return _colorize(text, color) if self._color else text

    def _render_header(self) -> str:
        s = self._summary
        sep = "  " + "─" * 38
        grade = self._paint(s.grade, _score_color(s.score))
        excluded = s.total_findings - s.scoring_findings

        lines = [
            "",
            f"  {self._paint(REPORT_TITLE, ANSI_BOLD)}",
            sep,
            "",
            f"  Grade       {grade} ({s.score}/100)",
            f"  Findings    {self._format_counts()}",
        ]
        if excluded:
            lines.append(f"  Scoring     {s.scoring_findings} of {s.total_findings} ({excluded} excluded)")
        lines.append(f"  Files       {s.scanned_files} scanned")
        lines.append(f"  Duration    {s.duration}ms")
        if self._verbose and self._fingerprint:
            lines.append(f"  Policy      {self._fingerprint[:12]}")
        lines.append("")
        return "\n".join(lines)

    def _format_counts(self) -> str:
        s = self._summary
        counts = {"critical": s.critical, "high": s.high, "medium": s.medium, "info": s.info}
        parts = [
            f"{counts[severity]} {self._paint(severity, SEVERITY_COLORS[severity])}"
            for severity in SEVERITIES
            if counts[severity]
        ]
        return ", ".join(parts) if parts else "none"

    def _render_findings(self) -> str:
        """List findings grouped by the scanner that reported them."""
        if self._summary.total_findings == 0:
            return "  " + self._paint("No vulnerabilities found.", ANSI_GREEN) + "\n"
        lines: list[str] = []
        for result in self._results or ():
            if not result.findings:
                continue
            lines.append(f"  ── {self._paint(result.scanner, ANSI_BOLD)} ──")
            lines.append(f"     Scanned {result.files_scanned} files in {result.duration}ms")
            lines.append("")
            for finding in result.findings:
                lines.extend(self._format_finding(finding))
        return "\n".join(lines)

    def _format_finding(self, finding: Finding) -> list[str]:
        label = self._paint(f"{finding.severity.upper():<8}", SEVERITY_COLORS[finding.severity])
        lines = [f"  {label} {finding.title}"]
        if finding.description:
            lines.append(f"     {finding.description}")
        if finding.file:
            location = f"{finding.file}:{finding.line}" if finding.line else finding.file
            lines.append(f"     at {location}")
        if finding.recommendation:
            lines.append(f"     fix: {finding.recommendation}")
        lines.append("")
        return lines

    def _render_dimensions(self) -> str:
        if not self._summary.dimensions:
            return ""
        width = max(len(name) for name in self._summary.dimensions)
        lines = ["  Dimensions"]
        for name, dimension in self._summary.dimensions.items():
            grade = self._paint(f"{dimension.grade:<2}", _score_color(dimension.score))
            lines.append(f"    {name:<{width}}  {dimension.score:>3}  {grade}  {dimension.findings} findings")
        lines.append("")
        return "\n".join(lines)

    def _render_breakdown(self) -> str:
        breakdown = self._summary.scanner_breakdown
        if not breakdown:
            return ""
        ranked = sorted(breakdown.items(), key=lambda item: (-sum(item[1].values()), item[0]))
        lines = ["  Scanners"]
        for scanner, counts in ranked[: self._breakdown_limit]:
            rendered = " ".join(f"{severity[0].upper()}:{counts.get(severity, 0)}" for severity in SEVERITIES)
            lines.append(f"    {scanner:<32} {rendered}")
        lines.append("")
        return "\n".join(lines)

    def _render_notes(self) -> str:
        s = self._summary
        notes: list[str] = []
        if s.critical:
            notes.append(self._paint("Critical issues found. Address these immediately.", ANSI_RED))
        if s.high:
            notes.append(self._paint("High severity issues require attention.", ANSI_YELLOW))
        if s.score >= 90 and not s.critical:
            notes.append(self._paint("Strong security posture.", ANSI_GREEN))
        if not notes:
            return ""
        return "\n".join(f"  {note}" for note in notes) + "\n"
