"""Deterministic floor plan placement and architectural review."""

__version__ = "0.1.0"
