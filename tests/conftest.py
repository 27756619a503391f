"""Shared pytest fixtures for repository-local test data."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest


@pytest.fixture()
def write_results(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes a scanner results JSON document."""

    def _write(payload: Any, name: str = "results.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write


@pytest.fixture(scope="session")
def schemas_root() -> Path:
    """Return the repository schema directory."""
    return Path(__file__).resolve().parents[1] / "schemas"
