from typing import Final

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_LOG_FILE
from .domain.constants import DEFAULT_LANGUAGE


class Settings(BaseSettings):
    """Library settings loaded from environment variables and .env files.

    Rule behavior never depends on these; they only shape logging and the
    messages rendered by the application layer.
    """

    # Logging configuration
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Root log level")
    log_to_file: bool = Field(
        default=False, description="Also write log records to log_file"
    )
    log_file: str = Field(
        default=DEFAULT_LOG_FILE, description="Log file used when log_to_file is set"
    )

    # Message configuration
    language: str = Field(
        default=DEFAULT_LANGUAGE,
        min_length=2,
        description="Language of default message templates",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the log level and reject unknown names."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    # Pydantic Settings configuration
    model_config = SettingsConfigDict(
        env_prefix="LENGTHGUARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


# Global settings instance
settings: Final = Settings()
