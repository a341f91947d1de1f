"""Rainwater harvesting feasibility calculator."""

__version__ = "0.1.0"
