"""
Notes API: Application Configuration
======================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads NOTES_* environment variables (or a .env file),
       validates types/ranges, and provides a module-level `settings` object.
Who:   Imported by the app factory, middleware, and the server entry point.
When:  Loaded once at import time. `create_app()` accepts an explicit
       Settings instance so tests can build apps with their own values.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults suitable for running the service locally.
    Attributes are grouped by concern.
    """

    # ── Server ────────────────────────────────────────────────────────────
    # Loopback only: the service has no authentication.
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8080, ge=1, le=65535)

    # What: Expose FastAPI's /docs, /redoc and /openapi.json
    # Off by default so every unknown path answers 404.
    enable_docs: bool = Field(default=False)

    # ── Notes ─────────────────────────────────────────────────────────────
    # What: Upper bound on request body size, checked before JSON parsing
    # 16 KiB comfortably fits a short note.
    max_body_bytes: int = Field(default=16 * 1024, ge=1)

    # What: First id handed out by the store
    id_start: int = Field(default=1, ge=0)

    # ── Logging ───────────────────────────────────────────────────────────
    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = SettingsConfigDict(
        env_prefix="NOTES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def bind_address(self) -> str:
        """host:port string for log lines."""
        return f"{self.host}:{self.port}"


settings = Settings()
