"""
Admin viewer pages.

Components:
- render_login: Login form posting to /view
- render_sessions: List of logged sessions
- render_session: Elevation chart + track map for one session
"""

from .rendering import build_track, render_login, render_sessions, render_session

__all__ = [
    "build_track",
    "render_login",
    "render_sessions",
    "render_session",
]
