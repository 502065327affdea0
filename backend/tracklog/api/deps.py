"""
Shared route dependencies.

Everything is read from app.state, populated once by create_app().
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from tracklog.config import Settings
from tracklog.db.session import get_async_db
from tracklog.features.elevation import ElevationClient
from tracklog.features.logs import LogRepository


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_elevation_client(request: Request) -> ElevationClient:
    return request.app.state.elevation


def get_log_repository(db: AsyncSession = Depends(get_async_db)) -> LogRepository:
    return LogRepository(db)
