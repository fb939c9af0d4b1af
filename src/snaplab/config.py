"""
Configuration management using Pydantic for SnapLab.
Provides type-safe configuration with validation and environment variable support.
"""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from snaplab.common.constants import (
    ProcessingConstants,
    SnapshotConstants,
    SystemConstants,
    ThresholdConstants,
)
from snaplab.exceptions import ConfigurationException
from snaplab.schemas.params import ThresholdParams

logger = logging.getLogger(__name__)


class SnapshotConfig(BaseSettings):
    """Snapshot capture and persistence configuration."""

    width: int = Field(
        default=SnapshotConstants.WORKING_WIDTH,
        ge=SnapshotConstants.MIN_DIMENSION,
        le=SnapshotConstants.MAX_DIMENSION,
        description="Working width every snapshot is resized to",
    )
    height: int = Field(
        default=SnapshotConstants.WORKING_HEIGHT,
        ge=SnapshotConstants.MIN_DIMENSION,
        le=SnapshotConstants.MAX_DIMENSION,
        description="Working height every snapshot is resized to",
    )
    save_dir: str = Field(
        default=SnapshotConstants.DEFAULT_SAVE_DIR, description="Directory for saved snapshots"
    )
    file_stem: str = Field(
        default=SnapshotConstants.DEFAULT_FILE_STEM,
        min_length=1,
        description="File name (without extension) for saved snapshots",
    )

    model_config = SettingsConfigDict(env_prefix="SNAPLAB_SNAPSHOT_", extra="ignore")


class ThresholdDefaults(BaseSettings):
    """Initial slider values for the threshold panels."""

    red: int = Field(default=ThresholdConstants.DEFAULT_RED, ge=0, le=255)
    green: int = Field(default=ThresholdConstants.DEFAULT_GREEN, ge=0, le=255)
    blue: int = Field(default=ThresholdConstants.DEFAULT_BLUE, ge=0, le=255)
    hue_center: float = Field(
        default=ThresholdConstants.DEFAULT_HUE_CENTER,
        ge=ProcessingConstants.HUE_MIN_DEG,
        le=ProcessingConstants.HUE_MAX_DEG,
    )
    cr: int = Field(default=ThresholdConstants.DEFAULT_CR, ge=0, le=255)

    model_config = SettingsConfigDict(env_prefix="SNAPLAB_THRESHOLD_", extra="ignore")

    def to_params(self) -> ThresholdParams:
        """Build per-call threshold parameters from the defaults."""
        return ThresholdParams(**self.model_dump())


class SystemConfig(BaseSettings):
    """System configuration."""

    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default=SystemConstants.LOG_LEVEL_DEFAULT, description="Logging level")

    model_config = SettingsConfigDict(env_prefix="SNAPLAB_SYSTEM_", extra="ignore")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        v_upper = v.upper()
        if v_upper not in SystemConstants.VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log level: {v}. Must be one of {SystemConstants.VALID_LOG_LEVELS}"
            )
        return v_upper


class Settings(BaseSettings):
    """Main application settings."""

    # Sub-configurations
    snapshot: SnapshotConfig = Field(default_factory=SnapshotConfig)
    thresholds: ThresholdDefaults = Field(default_factory=ThresholdDefaults)
    system: SystemConfig = Field(default_factory=SystemConfig)

    # Config file support
    config_file: Optional[str] = Field(default=None, description="Path to YAML config file")

    model_config = SettingsConfigDict(
        env_prefix="SNAPLAB_",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def load_config_file(cls, values):
        """Load configuration from YAML file if specified."""
        if not isinstance(values, dict):
            return values

        config_file = values.get("config_file") or os.getenv("SNAPLAB_CONFIG_FILE")

        if config_file and Path(config_file).exists():
            try:
                with open(config_file, "r") as f:
                    file_config = yaml.safe_load(f)
            except (OSError, yaml.YAMLError) as e:
                logger.warning(f"Failed to load config file {config_file}: {e}")
                return values

            if file_config and not isinstance(file_config, dict):
                raise ConfigurationException("config_file", "top level must be a mapping")

            # Merge file config with values (env vars take precedence)
            for key, value in (file_config or {}).items():
                if key not in values or values[key] is None:
                    values[key] = value

        return values

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return self.model_dump(exclude_none=True)

    def save_to_file(self, path: str) -> None:
        """Save current configuration to YAML file."""
        config_dict = self.to_dict()
        config_dict.pop("config_file", None)
        with open(path, "w") as f:
            yaml.dump(config_dict, f, default_flow_style=False)


def configure_logging(settings: Optional["Settings"] = None) -> None:
    """Configure root logging from settings."""
    settings = settings or get_settings()
    level = "DEBUG" if settings.system.debug else settings.system.log_level
    logging.basicConfig(level=getattr(logging, level), format=SystemConstants.LOG_FORMAT)


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings object with validated configuration
    """
    return Settings()


# Convenience function to reload settings (clears cache)
def reload_settings() -> Settings:
    """
    Reload settings, clearing the cache.

    Returns:
        Fresh Settings object
    """
    get_settings.cache_clear()
    return get_settings()
