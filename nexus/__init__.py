"""Nexus - local task board and notes workspace."""

__version__ = "0.1.0"
