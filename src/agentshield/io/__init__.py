"""Shared file I/O helpers."""

from .json_io import load_json_file, write_json_atomic
from .results import load_scan_results

__all__ = ["load_json_file", "load_scan_results", "write_json_atomic"]
