"""Derived statistics for Axis Mundi RPG actors."""

__version__ = "0.1.0"
