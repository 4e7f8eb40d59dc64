"""Configuration settings for Ringselect."""

from pathlib import Path

from pydantic import BaseModel, Field


class GeometryConfig(BaseModel):
    """Configuration for geometric predicates."""

    border_tolerance: float = Field(
        default=1e-9,
        ge=0.0,
        description="Distance under which a point counts as lying on a ring border",
    )


class SelectionConfig(BaseModel):
    """Configuration for ring selection."""

    standalone_within_code: int = Field(
        default=-1,
        ge=-1,
        le=1,
        description="within_code given to rings built without a companion geometry",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class RingSelectSettings(BaseModel):
    """Main application settings."""

    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    selection: SelectionConfig = Field(default_factory=SelectionConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> RingSelectSettings:
    """Get default application settings."""
    return RingSelectSettings()
