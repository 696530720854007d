"""
Configuration management using pydantic-settings.

LEARNING NOTES:
- pydantic-settings automatically loads values from environment variables
- It supports .env files out of the box (via python-dotenv)

This module handles:
- Where the todo list is stored
- How much logging goes to stderr

Environment variables are loaded in this priority order:
1. System environment variables (highest priority)
2. .env file in current directory
3. Default values defined in the Settings class
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Example:
        # In .env or shell:
        TODO_CLI_STORE_PATH=~/todos.json
        TODO_CLI_LOG_LEVEL=debug

        # In Python:
        settings = Settings()
        path = settings.store_path
    """

    store_path: Path = Field(
        default=Path("todos.json"),
        description="JSON file holding the todo list (relative to the working directory)"
    )

    log_level: str = Field(
        default="WARNING",
        description="Logging level for diagnostics written to stderr"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        # e.g., TODO_CLI_STORE_PATH, TODO_CLI_LOG_LEVEL
        env_prefix="TODO_CLI_",
        extra="ignore",
    )

    @field_validator("store_path")
    @classmethod
    def expand_user(cls, value: Path) -> Path:
        return value.expanduser()

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level


# ============================================================================
# Cached Settings
# ============================================================================
# Module-level cache so the .env file is read once per process.

_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get application settings (lazy-loaded singleton).

    Raises:
        ValidationError: If an environment value is invalid (e.g. an unknown log level)
    """
    global _settings

    if _settings is None:
        _settings = Settings()

    return _settings


def reset_settings() -> None:
    """Reset the cached settings (useful for testing)."""
    global _settings
    _settings = None
