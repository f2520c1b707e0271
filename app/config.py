"""
Application configuration using Pydantic Settings.
Loads environment variables and provides type-safe configuration.
"""

from typing import List, Optional
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator
from pathlib import Path

# Get the base directory
BASE_DIR = Path(__file__).resolve().parent.parent

DEFAULT_CORS_ORIGINS = ["http://localhost:3000", "http://localhost:5173"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment
    environment: str = Field(default="development", description="Current environment")
    debug: bool = Field(default=False, description="Debug mode")

    # API Configuration
    api_title: str = Field(default="Gigboard API")
    api_version: str = Field(default="1.0.0")
    api_prefix: str = Field(default="/api/v1")
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)

    # Database
    database_url: str = Field(default="sqlite:///./gigboard.db", description="SQLAlchemy database URL")

    # Supabase Configuration
    supabase_url: str = Field(default="https://example.supabase.co", description="Supabase project URL")
    supabase_service_key: str = Field(default="temp-key", description="Supabase service role key")

    # Identity tokens
    supabase_jwt_secret: str = Field(default="development-secret-key-change-in-production", description="JWT secret key")
    jwt_algorithm: str = Field(default="HS256")

    # CORS
    cors_origins: str | List[str] = Field(default="http://localhost:3000,http://localhost:5173", validate_default=True)
    cors_allow_credentials: bool = Field(default=True)
    cors_allow_methods: List[str] = Field(default=["*"])
    cors_allow_headers: List[str] = Field(default=["*"])

    # Host header allow-list; empty disables the check
    trusted_hosts: str | List[str] = Field(default="", validate_default=True)

    # Pagination
    default_page_size: int = Field(default=9)

    # Audio tracks
    audio_bucket: str = Field(default="audio-tracks")
    audio_folder: str = Field(default="audio-tracks")
    max_audio_size_mb: int = Field(default=10)
    max_audio_tracks: int = Field(default=4)

    # Sentry (Optional)
    sentry_dsn: Optional[str] = Field(default=None)
    sentry_traces_sample_rate: float = Field(default=0.1)

    @field_validator("trusted_hosts", mode="before")
    @classmethod
    def parse_trusted_hosts(cls, v):
        """Parse trusted hosts from comma-separated string or list."""
        if isinstance(v, str):
            return [host.strip() for host in v.split(",") if host.strip()]
        return v or []

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from comma-separated string or list."""
        if isinstance(v, str):
            if not v or v.strip() == "":
                return list(DEFAULT_CORS_ORIGINS)
            return [origin.strip() for origin in v.split(",")]
        elif v is None:
            return list(DEFAULT_CORS_ORIGINS)
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment.lower() == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    @property
    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.environment.lower() == "testing"

    @property
    def max_audio_size_bytes(self) -> int:
        """Get max audio upload size in bytes."""
        return self.max_audio_size_mb * 1024 * 1024

    def validate_environment(self) -> None:
        """Validate that all required environment variables are set."""
        required_vars = [
            "supabase_url",
            "supabase_service_key",
            "supabase_jwt_secret",
        ]

        missing_vars = []
        for var in required_vars:
            value = getattr(self, var, None)
            if not value or value == "temp-key":
                missing_vars.append(var.upper())

        if missing_vars:
            raise ValueError(
                f"Missing required environment variables: {', '.join(missing_vars)}"
            )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Use this function to get settings throughout the application.
    """
    settings = Settings()

    if settings.is_production:
        settings.validate_environment()

    return settings
