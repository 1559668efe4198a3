"""
Lambda-wide settings shared by the service configuration.

Only the logging switches live here; collaborator endpoints have their own
prefixed settings classes.

Dependencies: pydantic_settings
System role: Root of the service configuration
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class BaseSettings(PydanticBaseSettings):
    """Logging settings read from the Lambda environment or a local .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    debug: bool = Field(
        default=False,
        description="Log at DEBUG regardless of log_level",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level for the Lambda",
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"must be one of {', '.join(LOG_LEVELS)}")
        return level

    @property
    def effective_log_level(self) -> str:
        """Level handed to ``configure_logging``."""
        return "DEBUG" if self.debug else self.log_level
