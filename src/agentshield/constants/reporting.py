"""Constants for report file names, atomic writing, and stdout formatting."""

from __future__ import annotations

REPORT_TEMP_PREFIX: str = ".tmp-"
REPORT_TEMP_SUFFIX: str = ".json"

SCHEMA_VERSION: str = "1.0.0"

EXIT_CLEAN: int = 0
EXIT_HIGH: int = 1
EXIT_CRITICAL: int = 2
# Operational failures (bad config, unreadable input, unwritable output) stay
# distinct from the finding-driven codes above.
EXIT_ERROR: int = 3

# ANSI escape codes for terminal colouring.
ANSI_RESET: str = "\033[0m"
ANSI_BOLD: str = "\033[1m"
ANSI_RED: str = "\033[31;1m"
ANSI_ORANGE: str = "\033[38;5;208;1m"
ANSI_YELLOW: str = "\033[33;1m"
ANSI_GREEN: str = "\033[32;1m"
ANSI_BLUE: str = "\033[34m"

SEVERITY_COLORS: dict[str, str] = {
    "critical": ANSI_RED,
    "high": ANSI_ORANGE,
    "medium": ANSI_YELLOW,
    "info": ANSI_BLUE,
}

GOOD_SCORE_MIN: int = 80
PASSING_SCORE_MIN: int = 60
BREAKDOWN_DEFAULT_LIMIT: int = 10
