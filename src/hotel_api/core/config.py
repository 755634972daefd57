"""Application configuration via Pydantic Settings.

All configuration is loaded from environment variables following 12-factor principles.
"""

import re

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Database
    database_url: str = Field(
        description="PostgreSQL async connection string",
    )
    database_schema: str | None = Field(
        default=None,
        description="PostgreSQL schema for isolated environments (e.g., pr_42)",
    )
    db_max_open_conns: int = Field(
        default=25,
        description="Maximum open connections in the pool (pool size plus overflow)",
        gt=0,
    )
    db_max_idle_time_seconds: int = Field(
        default=900,
        description="Recycle pooled connections older than this many seconds",
        gt=0,
    )
    query_timeout_seconds: float = Field(
        default=3.0,
        description="Upper bound for a single list/get query",
        gt=0,
    )

    @field_validator("database_schema")
    @classmethod
    def validate_database_schema(cls, v: str | None) -> str | None:
        if v is None:
            return None
        if not re.match(r"^[a-z_][a-z0-9_]{0,62}$", v):
            msg = "Invalid database_schema: must match ^[a-z_][a-z0-9_]{0,62}$"
            raise ValueError(msg)
        return v

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_dir: str | None = Field(
        default=None,
        description="Directory for log files (enables file logging with 24h rotation when set)",
    )

    # Environment
    environment: str = Field(
        default="development",
        description="Deployment environment name (development, staging, production)",
    )

    # API
    api_v1_prefix: str = Field(
        default="/v1",
        description="API version prefix",
    )

    # CORS
    cors_origins: str = Field(
        default="",
        description="Comma-separated list of allowed CORS origins",
    )
    cors_origin_regex: str = Field(
        default="",
        description="Regex pattern for allowed CORS origins",
    )

    @property
    def cors_origin_list(self) -> list[str]:
        """Parse CORS origins string into a list."""
        if not self.cors_origins.strip():
            return []
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # Rate limiting
    limiter_enabled: bool = Field(
        default=True,
        description="Enable the per-client token bucket rate limiter",
    )
    limiter_rps: float = Field(
        default=2.0,
        description="Token refill rate in requests per second",
        gt=0,
    )
    limiter_burst: int = Field(
        default=4,
        description="Token bucket capacity (maximum burst size)",
        gt=0,
    )
    trusted_proxy_headers: str = Field(
        default="CF-Connecting-IP,X-Forwarded-For,X-Real-IP",
        description="Comma-separated list of HTTP headers to check for real client IP, in priority order",
    )

    @property
    def trusted_proxy_header_list(self) -> list[str]:
        """Parse trusted proxy headers string into a list."""
        if not self.trusted_proxy_headers.strip():
            return []
        return [h.strip() for h in self.trusted_proxy_headers.split(",") if h.strip()]

    # Metrics
    metrics_enabled: bool = Field(
        default=True,
        description="Collect request counters and expose them at /debug/vars",
    )

    # Review summaries
    openai_api_key: str | None = Field(
        default=None,
        description="API key for the chat-completion provider used for review summaries",
    )
    openai_model: str = Field(
        default="gpt-4o-mini",
        description="Chat-completion model name",
    )
    openai_base_url: str = Field(
        default="https://api.openai.com/v1",
        description="Chat-completion API base URL",
    )
    openai_timeout: float = Field(
        default=30.0,
        description="Chat-completion request timeout in seconds",
        gt=0,
    )

    # Partner sync
    partner_api_url: str = Field(
        default="",
        description="Base URL of the partner hotel data API",
    )
    partner_api_key: str | None = Field(
        default=None,
        description="API key sent in the x-api-key header to the partner API",
    )
    partner_timeout: float = Field(
        default=10.0,
        description="Partner API request timeout in seconds",
        gt=0,
    )
    sync_interval_minutes: int = Field(
        default=3,
        description="Minutes between partner sync passes",
        gt=0,
    )
    sync_max_attempts: int = Field(
        default=3,
        description="Attempts per partner request before giving up on a hotel",
        gt=0,
    )

    @field_validator("partner_api_url", "openai_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


def get_settings() -> Settings:
    """Create and return application settings."""
    return Settings()  # type: ignore[call-arg]
