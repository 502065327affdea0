"""
Log entry schemas.

Pydantic models for ingestion requests and read results.
"""
from datetime import datetime
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from tracklog.shared.errors import ValidationError


class LogEntryCreate(BaseModel):
    """Request body for POST /log."""
    model_config = ConfigDict(coerce_numbers_to_str=True)

    session_id: str = Field(..., min_length=1)
    user_id: str = Field(..., min_length=1)
    latitude: float
    longitude: float
    elevation: float = Field(..., description="Meters")

    @field_validator("latitude", "longitude", "elevation")
    @classmethod
    def reject_zero(cls, v: float) -> float:
        """A zero coordinate or elevation counts as missing."""
        if v == 0:
            raise ValueError("must be non-zero")
        return v


class SessionSummary(BaseModel):
    """One (session_id, user_id) pair and its first timestamp."""
    session_id: str
    user_id: str
    start_time: datetime


def parse_entry(data: Mapping[str, Any]) -> LogEntryCreate:
    """
    Validate a raw ingestion payload.

    Raises:
        ValidationError: Listing every field that is missing or empty
    """
    try:
        return LogEntryCreate.model_validate(data)
    except PydanticValidationError as e:
        fields = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
        raise ValidationError(f"Missing data: {', '.join(fields)}", fields=fields) from e
