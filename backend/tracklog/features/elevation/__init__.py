"""
Elevation lookup proxy.

Usage:
    from tracklog.features.elevation import ElevationClient
"""

from .client import ElevationClient

__all__ = ["ElevationClient"]
