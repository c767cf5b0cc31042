"""Tectonic-backed document compilation for desktop editors."""

__version__ = "0.1.0"
