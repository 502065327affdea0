"""
Ingestion Routes

Endpoint clients use to report GPS + elevation samples.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from tracklog.api.deps import get_log_repository
from tracklog.features.logs import LogEntryCreate, LogRepository
from tracklog.shared.errors import StorageError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/log", response_class=PlainTextResponse)
async def log_entry(
    payload: LogEntryCreate,
    repo: LogRepository = Depends(get_log_repository)
):
    """
    Store one sample.

    Missing or empty fields are rejected with 400 before reaching here
    (see the RequestValidationError handler in main).
    """
    try:
        await repo.append(payload)
    except StorageError:
        return PlainTextResponse("Database insert error", status_code=500)

    return PlainTextResponse("OK")
