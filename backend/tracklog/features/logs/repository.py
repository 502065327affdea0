"""
Log repository.

Data access layer for LogEntry: ingestion, session listing and
per-session reads. Every read path orders by timestamp ascending,
falling back to id for entries stored within the same microsecond.
"""

import logging
from typing import Any, Mapping

from sqlalchemy.ext.asyncio import AsyncSession

from tracklog.shared.repository import BaseRepository
from .aggregator import sessions_query, summarize_rows
from .models import LogEntry
from .schemas import LogEntryCreate, SessionSummary, parse_entry

logger = logging.getLogger(__name__)


class LogRepository(BaseRepository[LogEntry]):
    """Repository for log entry operations."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, LogEntry)

    async def append(self, entry: LogEntryCreate | Mapping[str, Any]) -> LogEntry:
        """
        Persist one sample.

        Args:
            entry: Validated schema or raw payload

        Returns:
            Stored entry with id and timestamp assigned

        Raises:
            ValidationError: If a required field is missing or empty
            StorageError: If the insert fails
        """
        if not isinstance(entry, LogEntryCreate):
            entry = parse_entry(entry)

        stored = await self.create(**entry.model_dump())
        logger.debug(f"Logged entry {stored.id} for session {stored.session_id}")
        return stored

    async def list_sessions(self) -> list[SessionSummary]:
        """
        Distinct (session_id, user_id) pairs with their start time.

        Returns:
            Summaries ordered by start time, most recent first
        """
        result = await self.execute(sessions_query())
        return summarize_rows(result.all())

    async def get_session(self, session_id: str) -> list[LogEntry]:
        """
        All entries of one session in chronological order.

        Args:
            session_id: Session identifier

        Returns:
            Entries ordered by timestamp; empty list if unknown
        """
        return await self.find(
            LogEntry.timestamp.asc(),
            LogEntry.id.asc(),
            session_id=session_id
        )
