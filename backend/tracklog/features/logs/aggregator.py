"""
Session aggregation.

A session is the set of log entries sharing (session_id, user_id);
its start time is the earliest timestamp among them. The same
session_id reported by two users is two sessions, never merged.

The store normally does this grouping in SQL (see sessions_query);
aggregate_sessions() is the in-process equivalent over loaded rows.
"""

from datetime import datetime
from typing import Iterable, Protocol

from sqlalchemy import Select, desc, func, select

from .models import LogEntry
from .schemas import SessionSummary


class EntryLike(Protocol):
    session_id: str
    user_id: str
    timestamp: datetime


def sessions_query() -> Select:
    """GROUP BY (session_id, user_id), newest start first."""
    start_time = func.min(LogEntry.timestamp).label("start_time")
    return (
        select(LogEntry.session_id, LogEntry.user_id, start_time)
        .group_by(LogEntry.session_id, LogEntry.user_id)
        .order_by(desc(start_time))
    )


def summarize_rows(rows: Iterable) -> list[SessionSummary]:
    """Convert (session_id, user_id, start_time) result rows."""
    return [
        SessionSummary(session_id=row.session_id, user_id=row.user_id, start_time=row.start_time)
        for row in rows
    ]


def aggregate_sessions(entries: Iterable[EntryLike]) -> list[SessionSummary]:
    """
    Group entries by (session_id, user_id) in a single pass.

    Args:
        entries: Log entries in any order

    Returns:
        One summary per pair, ordered by start time descending.
        Equal start times keep first-seen order.
    """
    starts: dict[tuple[str, str], datetime] = {}
    for entry in entries:
        key = (entry.session_id, entry.user_id)
        current = starts.get(key)
        if current is None or entry.timestamp < current:
            starts[key] = entry.timestamp

    summaries = [
        SessionSummary(session_id=session_id, user_id=user_id, start_time=start)
        for (session_id, user_id), start in starts.items()
    ]
    # sorted() is stable with reverse=True, so ties keep insertion order
    return sorted(summaries, key=lambda s: s.start_time, reverse=True)
