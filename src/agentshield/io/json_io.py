"""JSON read/write helpers for scan inputs and reports."""

from __future__ import annotations

import json
import os
import tempfile
from contextlib import suppress
from pathlib import Path

from agentshield.constants.reporting import REPORT_TEMP_PREFIX, REPORT_TEMP_SUFFIX


def load_json_file(path: Path) -> object:
    """Load and parse JSON from disk."""
    return json.loads(path.read_text(encoding="utf-8"))


def write_json_atomic(
    path: Path,
    payload: object,
    *,
    temp_prefix: str = REPORT_TEMP_PREFIX,
    temp_suffix: str = REPORT_TEMP_SUFFIX,
) -> None:
    """Write *payload* to *path* so readers never observe a partial document.

    Serialization happens before any file is created; the temp file lives
    beside the destination so ``os.replace`` stays on one filesystem.
    """
    document = json.dumps(payload, indent=2) + "\n"
    path.parent.mkdir(parents=True, exist_ok=True)

    fd, temp_name = tempfile.mkstemp(dir=path.parent, prefix=temp_prefix, suffix=temp_suffix)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(document)
        os.replace(temp_name, path)
    except OSError:
        with suppress(FileNotFoundError):
            Path(temp_name).unlink()
        raise
