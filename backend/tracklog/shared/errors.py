"""
Error taxonomy.

Domain code raises these; the HTTP layer converts them to a status
code and a generic message at the boundary of each endpoint.
"""


class TracklogError(Exception):
    """Base tracklog error."""

    status_code = 500
    detail = "Internal server error"


class ValidationError(TracklogError):
    """Required field missing or empty."""

    status_code = 400
    detail = "Missing data"

    def __init__(self, message: str = "Missing data", fields: list[str] | None = None):
        super().__init__(message)
        self.fields = fields or []


class AuthError(TracklogError):
    """Credential mismatch."""

    status_code = 401
    detail = "Invalid credentials"


class NotFoundError(TracklogError):
    """Query returned nothing for the requested key."""

    status_code = 404
    detail = "Not found"


class StorageError(TracklogError):
    """Backing store unreachable or query failed."""

    pass


class UpstreamError(TracklogError):
    """Elevation API unavailable or returned a non-success status."""

    pass
