"""
HTML pages for the admin viewer.

Templates are rendered with autoescaping; entry data for the chart and
map is embedded as JSON via the tojson filter.
"""

from pathlib import Path
from typing import Sequence

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from tracklog.features.logs import LogEntry, SessionSummary
from tracklog.features.logs.export import export_filename

TEMPLATES_DIR = Path(__file__).parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

# Initial Leaflet zoom on the first point of the track
MAP_ZOOM = 14


def build_track(entries: Sequence[LogEntry]) -> dict:
    """
    Chart and map data for one session.

    Args:
        entries: Session entries in chronological order (non-empty)

    Returns:
        Dict with time labels, elevations, [lat, lon] pairs and map center
    """
    latlngs = [[e.latitude, e.longitude] for e in entries]
    return {
        "labels": [e.timestamp.strftime("%H:%M:%S") for e in entries],
        "elevations": [e.elevation for e in entries],
        "latlngs": latlngs,
        "center": latlngs[0],
        "zoom": MAP_ZOOM,
    }


def render_login(request: Request) -> HTMLResponse:
    return templates.TemplateResponse(request, "login.html", {})


def render_sessions(request: Request, sessions: Sequence[SessionSummary]) -> HTMLResponse:
    return templates.TemplateResponse(request, "sessions.html", {"sessions": sessions})


def render_session(request: Request, session_id: str, entries: Sequence[LogEntry]) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "session.html",
        {
            "session_id": session_id,
            "track": build_track(entries),
            "csv_name": export_filename(session_id),
        },
    )
