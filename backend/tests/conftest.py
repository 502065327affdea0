"""
Shared fixtures.

Each test gets its own SQLite file under tmp_path, so tests never
share rows.
"""

import sqlite3

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from tracklog.config import Settings
from tracklog.db.session import Database
from tracklog.features.logs import LogRepository
from tracklog.main import create_app


ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "s3cret"
ELEVATION_API_URL = "https://elevation.test/v1/test-dataset"


# =============================================================================
# Configuration
# =============================================================================

@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "tracklog.db"


@pytest.fixture
def settings(tmp_path, db_path):
    """Settings isolated from the environment and .env files."""
    return Settings(
        _env_file=None,
        database_url=f"sqlite:///{db_path}",
        admin_username=ADMIN_USERNAME,
        admin_password=ADMIN_PASSWORD,
        elevation_api_url=ELEVATION_API_URL,
        static_dir=tmp_path / "public",
    )


# =============================================================================
# Database
# =============================================================================

@pytest_asyncio.fixture
async def database(settings):
    db = Database(settings)
    await db.init()
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def repo(database):
    async with database.session() as session:
        yield LogRepository(session)


@pytest.fixture
def count_rows(db_path):
    """Count rows in the logs table straight from the SQLite file."""
    def _count() -> int:
        conn = sqlite3.connect(db_path)
        try:
            return conn.execute("SELECT COUNT(*) FROM logs").fetchone()[0]
        finally:
            conn.close()
    return _count


# =============================================================================
# HTTP
# =============================================================================

@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    """Test client with lifespan (tables created)."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def log_sample(client):
    """POST one sample to /log and assert it was accepted."""
    def _log(session_id="s1", user_id="u1", latitude=1.0, longitude=2.0, elevation=10.0):
        response = client.post("/log", json={
            "session_id": session_id,
            "user_id": user_id,
            "latitude": latitude,
            "longitude": longitude,
            "elevation": elevation,
        })
        assert response.status_code == 200
    return _log


@pytest.fixture
def admin_form():
    return {"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD}
