"""Scanner capability and registry."""

from agentshield.scanner.base import Scanner
from agentshield.scanner.registry import ScannerRegistry, select_scanners

__all__ = ["Scanner", "ScannerRegistry", "select_scanners"]
