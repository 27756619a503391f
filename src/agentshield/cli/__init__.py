"""Command-line interface for AgentShield scoring."""
