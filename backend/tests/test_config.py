"""
Tests for Settings and database URL handling.
"""

from tracklog.config import Settings
from tracklog.db.session import _get_async_url


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, monkeypatch):
        for var in ("DATABASE_URL", "PORT", "ADMIN_USERNAME", "ADMIN_PASSWORD", "NODE_ENV", "ENVIRONMENT"):
            monkeypatch.delenv(var, raising=False)

        settings = Settings(_env_file=None)

        assert settings.port == 3000
        assert settings.admin_username is None
        assert settings.database_url.startswith("sqlite:///")
        assert not settings.is_production

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db:5432/logs")
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("ADMIN_USERNAME", "admin")
        monkeypatch.setenv("ADMIN_PASSWORD", "pw")

        settings = Settings(_env_file=None)

        assert settings.database_url == "postgresql://u:p@db:5432/logs"
        assert settings.port == 8080
        assert (settings.admin_username, settings.admin_password) == ("admin", "pw")

    def test_postgres_scheme_fixed(self):
        settings = Settings(_env_file=None, database_url="postgres://u:p@db/logs")
        assert settings.database_url == "postgresql://u:p@db/logs"

    def test_node_env_production(self, monkeypatch):
        monkeypatch.delenv("ENVIRONMENT", raising=False)
        monkeypatch.setenv("NODE_ENV", "production")

        assert Settings(_env_file=None).is_production


class TestAsyncUrl:
    """Tests for sync -> async driver URL conversion."""

    def test_sqlite(self):
        assert _get_async_url("sqlite:///./tracklog.db") == "sqlite+aiosqlite:///./tracklog.db"

    def test_postgres(self):
        assert _get_async_url("postgresql://u:p@db/logs") == "postgresql+asyncpg://u:p@db/logs"

    def test_other_untouched(self):
        assert _get_async_url("mysql+aiomysql://db/logs") == "mysql+aiomysql://db/logs"
