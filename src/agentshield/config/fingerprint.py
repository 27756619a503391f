"""Scoring policy fingerprinting for reproducible CI gating."""

from __future__ import annotations

import hashlib
import json

from agentshield.config.model import AgentShieldConfig


def config_fingerprint(config: AgentShieldConfig) -> str:
    """Return a stable hash of the effective scoring policy.

    Two runs with the same fingerprint score the same findings identically.
    """
    payload = {
        "scoring": config.scoring.to_dict(),
        "dimension_order": list(config.scoring.dimensions),
    }
    blob = json.dumps(payload, sort_keys=True, separators=(",", ":")).encode("utf-8")
    return hashlib.sha256(blob).hexdigest()
