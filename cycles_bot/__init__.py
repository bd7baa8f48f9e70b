"""Autonomous light-cycle bot: per-tick decision engine and local arena."""

__version__ = "0.1.0"
