"""
Database Models

Feature models live in their feature packages (features/*/models.py)
and are imported by register_models() so Base.metadata sees them.
"""

from tracklog.models.base import Base


def register_models() -> None:
    """Import all feature models to register them with Base.metadata."""
    from tracklog.features.logs import models  # noqa


__all__ = [
    "Base",
    "register_models",
]
