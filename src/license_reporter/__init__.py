"""Classify dependency licenses against an approved unified list."""

__version__ = "0.1.0"
