"""
Application Configuration

Uses Pydantic Settings for type-safe configuration.
Settings are resolved once at startup and handed to create_app().
"""

from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import AliasChoices, Field, field_validator, ConfigDict

# Project root: tracklog/
PROJECT_ROOT = Path(__file__).parent.parent.parent


class Settings(BaseSettings):
    """Application settings with validation."""

    # === Core ===
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Logging level")
    environment: str = Field(
        default="development",
        validation_alias=AliasChoices("environment", "node_env"),
        description="Deployment environment (production enables DB TLS)"
    )

    # === Server ===
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000)
    static_dir: Path = Field(
        default=Path("public"),
        description="Directory served as static files, if it exists"
    )

    # === Database ===
    database_url: str = Field(
        default="sqlite:///./tracklog.db",
        description="Database connection URL"
    )

    # === Admin viewer ===
    admin_username: Optional[str] = Field(default=None)
    admin_password: Optional[str] = Field(default=None)

    # === Elevation API ===
    elevation_api_url: str = Field(
        default="https://api.opentopodata.org/v1/test-dataset",
        description="Elevation API endpoint"
    )
    elevation_timeout: float = Field(default=5.0, description="Seconds")

    @field_validator('database_url')
    @classmethod
    def fix_postgres_url(cls, v: str) -> str:
        """Fix Render/Railway postgres:// URL to postgresql://"""
        if v.startswith("postgres://"):
            return v.replace("postgres://", "postgresql://", 1)
        return v

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )
