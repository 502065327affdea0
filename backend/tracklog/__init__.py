"""Tracklog: GPS + elevation session logging service."""

__version__ = "0.1.0"
