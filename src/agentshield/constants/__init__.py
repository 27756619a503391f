"""Constant tables shared across AgentShield modules."""
