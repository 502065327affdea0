"""
Shared utilities (NOT business logic).

Usage:
    from tracklog.shared import BaseRepository, StorageError
"""
from .errors import (
    TracklogError,
    ValidationError,
    AuthError,
    NotFoundError,
    StorageError,
    UpstreamError,
)
from .repository import BaseRepository

__all__ = [
    # Errors
    "TracklogError",
    "ValidationError",
    "AuthError",
    "NotFoundError",
    "StorageError",
    "UpstreamError",
    # Data access
    "BaseRepository",
]
