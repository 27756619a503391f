"""Scoring exclusion: findings that are displayed but never penalized."""

from __future__ import annotations

import re
from pathlib import PurePosixPath

from agentshield.model import Finding
from agentshield.types import ExclusionPolicy

_TEST_DIR_NAMES: frozenset[str] = frozenset({"tests", "__tests__"})
_TEST_FILE_PATTERN: re.Pattern[str] = re.compile(r"\.(?:test|spec)\.[^.]+$")


def is_excluded_from_scoring(finding: Finding, scanner: str, policy: ExclusionPolicy) -> bool:
    """Return whether *finding*, reported by *scanner*, must not affect the score."""
    return policy.excludes(scanner=scanner, severity=finding.severity, is_test_file=finding.is_test_file)


def is_test_file_for_scoring(path: str) -> bool:
    """Return whether a reported file path belongs to a test suite.

    Matches files below a ``tests/`` or ``__tests__/`` directory and
    ``*.test.*`` / ``*.spec.*`` names. Names that merely contain "test",
    such as ``test-utils.ts``, do not match.
    """
    pure = PurePosixPath(path.replace("\\", "/"))
    if any(part in _TEST_DIR_NAMES for part in pure.parts[:-1]):
        return True
    return _TEST_FILE_PATTERN.search(pure.name) is not None
