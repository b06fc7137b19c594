"""
Application Configuration

Uses Pydantic Settings for type-safe configuration.
"""

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator, ConfigDict

from trackmap.shared.constants import EXPORT_FILENAME


class Settings(BaseSettings):
    """Application settings with validation."""

    # === Core ===
    log_level: str = Field(default="INFO", description="Logging level")

    # === Remote tracks ===
    http_timeout_seconds: float = Field(
        default=30.0,
        description="Timeout for fetching a track by URL"
    )

    # === GPX export ===
    export_filename: str = Field(
        default=EXPORT_FILENAME,
        description="File name of the merged GPX export"
    )
    gpx_creator: str = Field(
        default="trackmap",
        description="Value of the creator attribute in exported GPX"
    )
    gpx_author: str = Field(
        default="trackmap",
        description="Author name written to exported GPX metadata"
    )

    @field_validator('log_level')
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept 'debug', 'Info', ... as well as upper case."""
        return v.strip().upper()

    @field_validator('http_timeout_seconds')
    @classmethod
    def positive_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("http_timeout_seconds must be positive")
        return v

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="TRACKMAP_",
        case_sensitive=False,
        extra="ignore"
    )


# Global settings instance
settings = Settings()
