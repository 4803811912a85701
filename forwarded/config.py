"""Configuration management for the forwarded-header service."""

from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field, field_validator

from .lib.extractors import EXTRACTOR_NAMES, Extractor, build_extractor


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Config(BaseSettings):
    """Application configuration."""

    # Server settings
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind to"
    )

    port: int = Field(
        default=9300,
        description="Port to listen on"
    )

    workers: int = Field(
        default=1,
        ge=1,
        description="Number of uvicorn worker processes (each builds its own app)"
    )

    # Extraction settings
    strategies: str = Field(
        default="standard,legacy",
        description="Comma-separated extraction strategies in priority order (standard, legacy)"
    )

    lowercase_values: bool = Field(
        default=True,
        description="Lower-case values read from the Forwarded header"
    )

    overwrite_empty_client: bool = Field(
        default=False,
        description="Overwrite the peer address even when no forwarded-for value is found"
    )

    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Log file path (logs to stdout if not specified)"
    )

    log_json: bool = Field(
        default=False,
        description="Use JSON format for logs"
    )

    log_dropped_segments: bool = Field(
        default=False,
        description="Log dropped Forwarded segments at DEBUG regardless of log_level"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",  # Ignore extra environment variables
    }

    @field_validator("strategies")
    @classmethod
    def validate_strategies(cls, v: str) -> str:
        """Reject unknown strategy names early."""
        names = [name.strip().lower() for name in v.split(",") if name.strip()]
        unknown = [name for name in names if name not in EXTRACTOR_NAMES]
        if unknown:
            raise ValueError(
                f"Unknown strategies: {', '.join(unknown)} "
                f"(expected: {', '.join(EXTRACTOR_NAMES)})"
            )
        return ",".join(names)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Accept standard level names only, so uvicorn gets the same level."""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level '{v}' (expected one of: {', '.join(LOG_LEVELS)})")
        return level

    def build_extractor(self) -> Extractor:
        """Build the extractor described by this configuration."""
        return build_extractor(self.strategies, lowercase_values=self.lowercase_values)


def load_config() -> Config:
    """Load configuration from environment."""
    return Config()
