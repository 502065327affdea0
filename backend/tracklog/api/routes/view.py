"""
Viewer Routes

Login-gated session list plus per-session chart/map page and CSV export.
Credentials are compared against the configured admin pair on every
POST; no cookie or server-side login state is kept.
"""

import logging
import secrets
from typing import Annotated

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, StreamingResponse
from pydantic import BaseModel, Field

from tracklog.api.deps import get_log_repository, get_settings
from tracklog.config import Settings
from tracklog.features.logs import LogRepository, content_disposition, iter_csv_lines
from tracklog.features.viewer import render_login, render_session, render_sessions
from tracklog.shared.errors import AuthError, NotFoundError, StorageError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/view")


# =============================================================================
# Auth
# =============================================================================

class LoginForm(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


def verify_admin(settings: Settings, form: LoginForm) -> None:
    """
    Check submitted credentials against the configured admin pair.

    Raises:
        AuthError: On mismatch, or when no admin is configured
    """
    if not settings.admin_username or not settings.admin_password:
        raise AuthError("Admin credentials not configured")
    username_ok = secrets.compare_digest(form.username.encode(), settings.admin_username.encode())
    password_ok = secrets.compare_digest(form.password.encode(), settings.admin_password.encode())
    if not (username_ok and password_ok):
        raise AuthError("Invalid credentials")


async def _load_session(repo: LogRepository, session_id: str):
    entries = await repo.get_session(session_id)
    if not entries:
        raise NotFoundError(f"Session {session_id} not found")
    return entries


# =============================================================================
# Endpoints
# =============================================================================

@router.get("", response_class=HTMLResponse)
async def login_page(request: Request):
    """Login form."""
    return render_login(request)


@router.post("", response_class=HTMLResponse)
async def list_sessions(
    request: Request,
    form: Annotated[LoginForm, Form()],
    settings: Settings = Depends(get_settings),
    repo: LogRepository = Depends(get_log_repository),
):
    """Verify credentials, then list every logged session."""
    try:
        verify_admin(settings, form)
    except AuthError:
        logger.warning("Rejected viewer login")
        return PlainTextResponse("Invalid credentials", status_code=401)

    try:
        sessions = await repo.list_sessions()
    except StorageError:
        return PlainTextResponse("Error fetching sessions", status_code=500)

    return render_sessions(request, sessions)


@router.get("/session/{session_id}/export")
async def export_session(
    session_id: str,
    repo: LogRepository = Depends(get_log_repository),
):
    """Stream one session as CSV."""
    try:
        entries = await _load_session(repo, session_id)
    except NotFoundError:
        return PlainTextResponse("Session not found", status_code=404)
    except StorageError:
        return PlainTextResponse("CSV export error", status_code=500)

    return StreamingResponse(
        iter_csv_lines(entries),
        media_type="text/csv",
        headers={"Content-Disposition": content_disposition(session_id)},
    )


@router.get("/session/{session_id}", response_class=HTMLResponse)
async def view_session(
    request: Request,
    session_id: str,
    repo: LogRepository = Depends(get_log_repository),
):
    """Elevation chart and track map for one session."""
    try:
        entries = await _load_session(repo, session_id)
    except NotFoundError:
        return PlainTextResponse("Session not found", status_code=404)
    except StorageError:
        return PlainTextResponse("Session view error", status_code=500)

    return render_session(request, session_id, entries)
