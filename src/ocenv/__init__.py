"""Ephemeral per-cluster shell environments."""

__version__ = "0.1.0"
