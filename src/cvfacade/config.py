"""
Configuration management using Pydantic for cvfacade.
Provides type-safe configuration with validation and environment variable support.

Facade operations never read these settings; they only drive logging setup
for applications embedding the package.
"""

import logging
import os
from functools import lru_cache
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cvfacade.common.constants import SystemConstants

logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "cvfacade"


class LoggingConfig(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="CVF_LOG_", extra="ignore")

    level: str = Field(default=SystemConstants.LOG_LEVEL_DEFAULT, description="Logging level")
    format: str = Field(default=SystemConstants.LOG_FORMAT, description="Log record format")
    file: Optional[str] = Field(default=None, description="Log file path")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v):
        """Validate log level."""
        v_upper = v.upper()
        if v_upper not in SystemConstants.VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log level: {v}. Must be one of {SystemConstants.VALID_LOG_LEVELS}"
            )
        return v_upper


class Settings(BaseSettings):
    """Main package settings."""

    model_config = SettingsConfigDict(
        env_prefix="CVF_",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )

    # Sub-configurations
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    # Environment
    environment: str = Field(
        default=SystemConstants.ENVIRONMENT_DEFAULT,
        description="Environment (development, staging, production, test)",
    )

    # Config file support
    config_file: Optional[str] = Field(default=None, description="Path to YAML config file")

    @model_validator(mode="before")
    @classmethod
    def load_config_file(cls, values: Any) -> Any:
        """Load configuration from YAML file if specified."""
        if not isinstance(values, dict):
            return values

        config_file = values.get("config_file") or os.getenv(SystemConstants.CONFIG_FILE_ENV)

        if config_file and Path(config_file).exists():
            try:
                with open(config_file, "r") as f:
                    file_config = yaml.safe_load(f)
            except (OSError, yaml.YAMLError) as e:
                logger.warning(f"Failed to load config file {config_file}: {e}")
                return values

            if isinstance(file_config, dict):
                # Merge file config with values (env vars take precedence)
                for key, value in file_config.items():
                    if key not in values or values[key] is None:
                        values[key] = value

        return values

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        """Validate environment value."""
        if v not in SystemConstants.VALID_ENVIRONMENTS:
            raise ValueError(
                f"Invalid environment: {v}. Must be one of {SystemConstants.VALID_ENVIRONMENTS}"
            )
        return v

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return self.model_dump(exclude_none=True)

    def save_to_file(self, path: str) -> None:
        """Save current configuration to YAML file."""
        config_dict = self.to_dict()
        config_dict.pop("config_file", None)
        with open(path, "w") as f:
            yaml.safe_dump(config_dict, f, default_flow_style=False)


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


def configure_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """
    Apply logging settings to the cvfacade logger hierarchy.

    Replaces handlers previously installed by this function, so it can be
    called again after reload_settings().

    Args:
        settings: Settings to apply; defaults to get_settings()

    Returns:
        The configured package logger
    """
    if settings is None:
        settings = get_settings()
    log_config = settings.logging

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(getattr(logging, log_config.level))

    for handler in list(package_logger.handlers):
        if getattr(handler, "_cvfacade_handler", False):
            package_logger.removeHandler(handler)
            handler.close()

    handlers = [logging.StreamHandler()]
    if log_config.file:
        handlers.append(
            RotatingFileHandler(
                log_config.file,
                maxBytes=SystemConstants.LOG_FILE_MAX_BYTES,
                backupCount=SystemConstants.LOG_FILE_BACKUP_COUNT,
            )
        )

    formatter = logging.Formatter(log_config.format)
    for handler in handlers:
        handler.setFormatter(formatter)
        handler._cvfacade_handler = True
        package_logger.addHandler(handler)

    logger.debug(f"Logging configured at level {log_config.level} ({settings.environment})")
    return package_logger
