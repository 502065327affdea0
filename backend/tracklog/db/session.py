"""
Database Session Management

Provides the async engine and session factory for one application.
A Database is built from Settings in create_app() and stored on
app.state; routes reach it through the get_async_db dependency.
"""

import logging
import ssl
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine, AsyncSession, async_sessionmaker

from tracklog.config import Settings

logger = logging.getLogger(__name__)


def _get_async_url(url: str) -> str:
    """Convert sync database URL to async version."""
    if url.startswith("sqlite:///"):
        return url.replace("sqlite:///", "sqlite+aiosqlite:///")
    elif url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://")
    return url


def _unverified_ssl_context() -> ssl.SSLContext:
    """TLS without certificate verification (managed Postgres hosts)."""
    context = ssl.create_default_context()
    context.check_hostname = False
    context.verify_mode = ssl.CERT_NONE
    return context


def create_engine_for(settings: Settings) -> AsyncEngine:
    """Create the async engine for the configured database URL."""
    url = _get_async_url(settings.database_url)

    if url.startswith("sqlite"):
        return create_async_engine(
            url,
            connect_args={"check_same_thread": False}
        )
    elif url.startswith("postgresql"):
        connect_args = {}
        if settings.is_production:
            connect_args["ssl"] = _unverified_ssl_context()
        # PostgreSQL with connection pool settings
        return create_async_engine(
            url,
            connect_args=connect_args,
            pool_size=5,
            max_overflow=10,
            pool_timeout=30,
            pool_recycle=1800,  # 30 minutes
        )
    return create_async_engine(url)


class Database:
    """Engine plus session factory, owned by one application instance."""

    def __init__(self, settings: Settings):
        self.engine = create_engine_for(settings)
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False
        )

    def session(self) -> AsyncSession:
        return self.session_factory()

    async def init(self) -> None:
        """Create tables that do not exist yet."""
        from tracklog.models import Base, register_models

        register_models()
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()


async def get_async_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Dependency for getting async database session."""
    database: Database = request.app.state.db
    async with database.session() as session:
        try:
            yield session
        finally:
            await session.close()
