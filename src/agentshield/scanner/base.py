"""Scanner interface consumed by the registry."""

from __future__ import annotations

import inspect
from abc import ABC, abstractmethod
from pathlib import Path
from typing import ClassVar

from agentshield.model import ScanResult


class Scanner(ABC):
    """Abstract base class for scanner implementations.

    Scanners detect issues under a target path and report them as one
    ``ScanResult``. The scoring engine only ever sees the results.
    """

    name: ClassVar[str]
    description: ClassVar[str] = ""

    def __init_subclass__(cls, **kwargs: object) -> None:
        """Validate concrete scanner subclasses define a non-empty `name`."""
        super().__init_subclass__(**kwargs)
        if inspect.isabstract(cls):
            return

        name = getattr(cls, "name", None)
        if not isinstance(name, str) or not name.strip():
            raise TypeError(f"{cls.__name__} must define a non-empty class attribute `name`")

    @abstractmethod
    def scan(self, target: Path) -> ScanResult:
        """Scan *target* and return this scanner's findings."""
