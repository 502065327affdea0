"""
Base repository with common data access operations.

Provides generic database operations for feature repositories.
Uses SQLAlchemy async session for non-blocking database access.
Driver failures are logged and re-raised as StorageError.

Usage:
    class LogRepository(BaseRepository[LogEntry]):
        def __init__(self, db: AsyncSession):
            super().__init__(db, LogEntry)

        async def get_session(self, session_id: str) -> list[LogEntry]:
            return await self.find(LogEntry.timestamp, session_id=session_id)
"""

import logging
from typing import Any, TypeVar, Generic, Type

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from .errors import StorageError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Errors raised by the engine or the driver while talking to the store
STORAGE_ERRORS = (SQLAlchemyError, OSError)


class BaseRepository(Generic[T]):
    """
    Base repository for database operations.

    All methods are async for use with AsyncSession. Each call issues
    a single statement; writes are committed immediately.
    """

    def __init__(self, db: AsyncSession, model: Type[T]):
        """
        Initialize repository.

        Args:
            db: Async database session
            model: SQLAlchemy model class
        """
        self.db = db
        self.model = model

    async def create(self, **kwargs) -> T:
        """
        Insert and commit a new entity.

        Args:
            **kwargs: Field values for new entity

        Returns:
            Created entity with generated columns populated

        Raises:
            StorageError: If the insert fails
        """
        entity = self.model(**kwargs)
        self.db.add(entity)
        try:
            await self.db.commit()
            await self.db.refresh(entity)
        except STORAGE_ERRORS as e:
            await self._rollback()
            logger.error(f"Insert into {self.model.__tablename__} failed: {e}")
            raise StorageError(f"Insert failed: {type(e).__name__}") from e
        return entity

    async def find(self, *order_by: Any, **kwargs) -> list[T]:
        """
        Get all entities matching criteria.

        Args:
            *order_by: Columns/expressions to order by
            **kwargs: Field name-value pairs to filter by

        Returns:
            List of matching entities (empty if none)
        """
        query = select(self.model)
        for key, value in kwargs.items():
            query = query.where(getattr(self.model, key) == value)
        if order_by:
            query = query.order_by(*order_by)
        result = await self.execute(query)
        return list(result.scalars().all())

    async def execute(self, statement):
        """Run a read statement, converting driver failures to StorageError."""
        try:
            return await self.db.execute(statement)
        except STORAGE_ERRORS as e:
            await self._rollback()
            logger.error(f"Query on {self.model.__tablename__} failed: {e}")
            raise StorageError(f"Query failed: {type(e).__name__}") from e

    async def _rollback(self) -> None:
        try:
            await self.db.rollback()
        except STORAGE_ERRORS:
            logger.warning("Rollback failed after storage error", exc_info=True)
