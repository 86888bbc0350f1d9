"""Configuration management."""

import math
from typing import Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigurationError(ValueError):
    """Raised when map construction parameters are unusable."""


class Settings(BaseSettings):
    """Application settings pulled from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="HEXMAP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Map Configuration
    map_width: int = Field(default=64, gt=0, description="Map width in hex cells")
    map_height: int = Field(default=48, gt=0, description="Map height in hex cells")
    hex_width: int = Field(default=32, gt=0, description="Hex width in pixels")
    hex_height: int = Field(default=30, gt=0, description="Hex height in pixels")
    seed: Optional[float] = Field(
        default=None, description="Noise seed (random per run when unset)"
    )

    # Rendering Configuration
    atlas_path: str = Field(
        default="img/fantasyhextiles_v3.png", description="Path to the tile sprite atlas"
    )
    output_path: str = Field(default="map.png", description="Rendered frame output path")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Logging format (plain or json)")

    @field_validator("seed")
    @classmethod
    def _seed_must_be_finite(cls, value: Optional[float]) -> Optional[float]:
        if value is not None and not math.isfinite(value):
            raise ValueError("seed must be a finite number")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @field_validator("log_format")
    @classmethod
    def _known_log_format(cls, value: str) -> str:
        if value not in ("plain", "json"):
            raise ValueError("log_format must be 'plain' or 'json'")
        return value


def load_settings(**overrides) -> Settings:
    """
    Build settings from the environment, applying explicit overrides.

    Overrides whose value is None are ignored so CLI defaults fall through
    to the environment.

    Raises:
        ConfigurationError: if any value fails validation
    """
    values = {key: value for key, value in overrides.items() if value is not None}
    try:
        return Settings(**values)
    except ValidationError as exc:
        raise ConfigurationError(str(exc)) from exc
