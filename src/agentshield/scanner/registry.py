"""Scanner registration and sequential execution."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable, Sequence
from pathlib import Path

from agentshield.model import ScanResult
from agentshield.scanner.base import Scanner

logger = logging.getLogger(__name__)


def select_scanners(scanners: Sequence[Scanner], names: Iterable[str]) -> list[Scanner]:
    """Keep scanners whose name contains any of *names*, case-insensitively.

    An empty *names* selection keeps every scanner.
    """
    wanted = [name.lower() for name in names if name.strip()]
    if not wanted:
        return list(scanners)
    return [scanner for scanner in scanners if any(name in scanner.name.lower() for name in wanted)]


class ScannerRegistry:
    """Ordered collection of scanners run against one target."""

    def __init__(self, scanners: Iterable[Scanner] = ()) -> None:
        self._scanners: list[Scanner] = list(scanners)

    def register(self, scanner: Scanner) -> None:
        self._scanners.append(scanner)

    @property
    def scanners(self) -> list[Scanner]:
        """Registered scanners in registration order (a copy)."""
        return list(self._scanners)

    def run_all(self, target: Path) -> list[ScanResult]:
        """Run every scanner against *target*.

        A scanner that raises contributes an empty result instead of aborting
        the run, so scoring sees fewer findings rather than an error.
        """
        results: list[ScanResult] = []
        for scanner in self._scanners:
            started_at = time.perf_counter()
            try:
                result = scanner.scan(target)
            except Exception as exc:
                elapsed_ms = (time.perf_counter() - started_at) * 1000
                logger.warning("Scanner %s failed on %s: %s", scanner.name, target, exc)
                result = ScanResult(scanner=scanner.name, duration=round(elapsed_ms))
            else:
                logger.debug(
                    "Scanner %s reported %d findings in %sms",
                    scanner.name,
                    len(result.findings),
                    result.duration,
                )
            results.append(result)
        return results
