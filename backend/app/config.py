"""
Notes API Backend: Application Configuration
============================================

What:  Centralized configuration using Pydantic Settings.
How:   Values are read from environment variables (or a `.env` file), coerced
       and validated once, and exposed through the `settings` singleton.
Who:   Imported by `app.main` (server bind, CORS, logging) and by tests that
       build an app with explicit settings.

Environment variables:
    PORT                 HTTP port (default 3001)
    HOST                 bind address (default 0.0.0.0)
    LOG_LEVEL            DEBUG | INFO | WARNING | ERROR | CRITICAL
    CORS_ORIGINS         comma-separated origins, "*" for any origin
    SEED_EXAMPLE_NOTES   seed the store with the two example notes
"""

from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Every field has a development default, so the service starts with no
    configuration at all and listens on port 3001.
    """

    # ── Server ────────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3001, ge=1, le=65535)

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

    # ── CORS ──────────────────────────────────────────────────────────────
    # The browser client is served from a different port, so any origin is
    # accepted unless narrowed here.
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list, dropping blanks."""
        origins = [origin.strip() for origin in self.cors_origins.split(",")]
        return [origin for origin in origins if origin] or ["*"]

    # ── Note Store ────────────────────────────────────────────────────────
    seed_example_notes: bool = Field(default=True)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # PORT and port both work
        "extra": "ignore",
    }


settings = Settings()
