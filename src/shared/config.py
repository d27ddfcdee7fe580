"""Configuration management for runstreak."""

import logging
from pathlib import Path
from zoneinfo import ZoneInfo

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models.pace import DEFAULT_DISTANCES, PaceDistance

logger = logging.getLogger(__name__)


def find_env_file() -> Path | None:
    """Find .env file at git root (project root)."""
    # Search up for git root and use .env there
    current = Path.cwd()
    for parent in [current, *current.parents]:
        if (parent / ".git").exists():
            env_file = parent / ".env"
            if env_file.exists():
                return env_file
            break
    # Fallback to current directory
    local_env = Path.cwd() / ".env"
    if local_env.exists():
        return local_env
    return None


# Find env file once at module load
_env_file = find_env_file()


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Values come from the process environment first, then from the .env file
    at the project root.
    """

    model_config = SettingsConfigDict(
        env_file=_env_file,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Data
    activities_file: str = Field(
        default="activities.json",
        description="Path to the JSON export of activities",
    )
    min_run_distance_km: float = Field(
        default=1.609344,
        description="Runs at or below this distance do not count toward the streak",
        ge=0,
    )

    # Streak
    timezone: str = Field(
        default="UTC",
        description="IANA timezone used to decide what 'today' is",
    )

    # Pace calculator
    default_pace: str = Field(
        default="04:30",
        description="Pace per kilometer shown when none is given",
    )
    pace_distances: list[PaceDistance] = Field(
        default_factory=lambda: list(DEFAULT_DISTANCES),
        description="Distances shown by the pace calculator, as JSON, in display order",
    )

    # Application Settings
    environment: str = Field(
        default="dev",
        description="Environment: dev, staging, prod",
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level",
    )

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Reject timezone names the zoneinfo database does not know."""
        try:
            ZoneInfo(v)
        except (KeyError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {v}") from e
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the log level name."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def zone(self) -> ZoneInfo:
        """Timezone object for the configured zone."""
        return ZoneInfo(self.timezone)


# Singleton instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern).

    Returns:
        Settings instance with all configuration
    """
    global _settings
    if _settings is None:
        _settings = Settings()
        logger.debug(f"Loaded settings for environment {_settings.environment}")
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
