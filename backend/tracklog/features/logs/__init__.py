"""
Session log module.

Usage:
    from tracklog.features.logs import LogRepository, LogEntryCreate
    from tracklog.features.logs import render_csv  # For export

Components:
- LogEntry: SQLAlchemy model for one GPS + elevation sample
- LogRepository: append / list_sessions / get_session
- aggregate_sessions: In-process session grouping
- iter_csv_lines, render_csv: CSV export formatter
"""

from .models import LogEntry
from .schemas import LogEntryCreate, SessionSummary, parse_entry
from .aggregator import aggregate_sessions, sessions_query
from .repository import LogRepository
from .export import CSV_HEADER, iter_csv_lines, render_csv, export_filename, content_disposition

__all__ = [
    # Model
    "LogEntry",
    # Data access
    "LogRepository",
    # Aggregation
    "aggregate_sessions",
    "sessions_query",
    # Export
    "CSV_HEADER",
    "iter_csv_lines",
    "render_csv",
    "export_filename",
    "content_disposition",
    # Schemas
    "LogEntryCreate",
    "SessionSummary",
    "parse_entry",
]
