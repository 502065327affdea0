"""
CSV export of a session.

Fields are joined with commas as-is: no quoting, no escaping. A
session_id or user_id containing a comma produces a row with extra
columns; downstream consumers of the existing export rely on the
exact byte layout, so it is kept.
"""

from datetime import datetime
from typing import Iterable, Iterator
from urllib.parse import quote

from .models import LogEntry

CSV_COLUMNS = (
    "id",
    "session_id",
    "user_id",
    "latitude",
    "longitude",
    "elevation",
    "timestamp",
)
CSV_HEADER = ",".join(CSV_COLUMNS)


def _format_value(value) -> str:
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


def format_row(entry: LogEntry) -> str:
    """One entry as a comma-joined line (no trailing newline)."""
    return ",".join(_format_value(getattr(entry, column)) for column in CSV_COLUMNS)


def iter_csv_lines(entries: Iterable[LogEntry]) -> Iterator[str]:
    """Yield the header and then one newline-terminated line per entry."""
    yield CSV_HEADER + "\n"
    for entry in entries:
        yield format_row(entry) + "\n"


def render_csv(entries: Iterable[LogEntry]) -> str:
    return "".join(iter_csv_lines(entries))


def export_filename(session_id: str) -> str:
    return f"{session_id}.csv"


def content_disposition(session_id: str) -> str:
    """
    Attachment header for the export download.

    Non-ASCII ids get an ASCII fallback name plus an RFC 5987
    filename* parameter, since header values must be latin-1.
    """
    filename = export_filename(session_id)
    if filename.isascii():
        return f"attachment; filename={filename}"
    fallback = filename.encode("ascii", "replace").decode("ascii").replace("?", "_")
    return f"attachment; filename={fallback}; filename*=UTF-8''{quote(filename)}"
