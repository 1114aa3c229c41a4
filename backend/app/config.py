"""
PassGate Configuration Module
Loads settings from environment variables with sensible defaults.
"""

from functools import lru_cache
from pathlib import Path
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_COMMON_PASSWORDS_FILE = str(Path(__file__).parent / "data" / "common_passwords.txt")

LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Secure Password Login"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # Logging
    log_dir: str = "/var/log/passgate"  # Empty disables the file handler
    log_level: str = "INFO"

    # Password Policy
    common_passwords_file: str = DEFAULT_COMMON_PASSWORDS_FILE

    # Rate Limiting
    rate_limit_enabled: bool = True
    rate_limit_general: str = "100/15minutes"  # Per client IP, all routes
    rate_limit_message: str = "Too many requests from this IP, please try again later."

    # Security Headers
    security_headers_enabled: bool = True
    hsts_max_age: int = 60 * 60 * 24 * 180  # 180 days

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the level name and reject unknown ones."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be a standard logging level, got {v!r}")
        return level


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    try:
        return Settings()
    except Exception as e:
        print(f"❌ Configuration Error: {e}")
        raise


# Convenience alias
settings = get_settings()
