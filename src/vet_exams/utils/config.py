"""
Configuration management utilities.

This module provides environment variable handling with type conversion,
the application configuration object, and logging configuration utilities.
"""

import logging
import logging.config
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..exceptions import ConfigurationException

ENV_PREFIX = "VET_EXAMS_"
DEFAULT_DATABASE_PATH = "tvusvet.db"
DEFAULT_BUSY_TIMEOUT = 5


class ConfigError(ConfigurationException):
    """Exception raised for configuration-related errors."""

    pass


class LogLevel(Enum):
    """Enumeration for log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class EnvironmentConfig:
    """Utility class for handling environment variables with type conversion."""

    @staticmethod
    def get_str(
        key: str, default: Optional[str] = None, required: bool = False
    ) -> Optional[str]:
        """
        Get a string environment variable.

        Args:
            key: Environment variable key
            default: Default value if not found
            required: Whether the variable is required

        Returns:
            String value or default

        Raises:
            ConfigError: If required variable is missing
        """
        value = os.getenv(key, default)

        if required and value is None:
            raise ConfigError(
                f"Required environment variable '{key}' is not set", config_key=key
            )

        return value

    @staticmethod
    def get_int(
        key: str, default: Optional[int] = None, required: bool = False
    ) -> Optional[int]:
        """
        Get an integer environment variable.

        Raises:
            ConfigError: If required variable is missing or invalid
        """
        value = os.getenv(key)

        if value is None:
            if required:
                raise ConfigError(
                    f"Required environment variable '{key}' is not set",
                    config_key=key,
                )
            return default

        try:
            return int(value)
        except ValueError:
            raise ConfigError(
                f"Environment variable '{key}' must be an integer, got: {value}",
                config_key=key,
                config_value=value,
            )

    @staticmethod
    def get_bool(
        key: str, default: Optional[bool] = None, required: bool = False
    ) -> Optional[bool]:
        """
        Get a boolean environment variable.

        Raises:
            ConfigError: If required variable is missing
        """
        value = os.getenv(key)

        if value is None:
            if required:
                raise ConfigError(
                    f"Required environment variable '{key}' is not set",
                    config_key=key,
                )
            return default

        return value.lower() in ("true", "1", "yes", "on", "enabled")


@dataclass
class AppConfig:
    """Runtime configuration for the exam records application."""

    database_path: str = DEFAULT_DATABASE_PATH
    echo: bool = False
    busy_timeout: int = DEFAULT_BUSY_TIMEOUT
    log_level: LogLevel = LogLevel.INFO
    log_file: Optional[str] = None
    theme: str = "system"

    @classmethod
    def from_environment(cls) -> "AppConfig":
        """
        Build configuration from ``VET_EXAMS_*`` environment variables.

        Raises:
            ConfigError: If a variable holds a value of the wrong type
        """
        level_name = EnvironmentConfig.get_str(f"{ENV_PREFIX}LOG_LEVEL", "INFO")
        try:
            log_level = LogLevel(level_name.upper())
        except ValueError:
            raise ConfigError(
                f"Unknown log level: {level_name}",
                config_key=f"{ENV_PREFIX}LOG_LEVEL",
                config_value=level_name,
            )

        return cls(
            database_path=EnvironmentConfig.get_str(
                f"{ENV_PREFIX}DATABASE_PATH", DEFAULT_DATABASE_PATH
            ),
            echo=EnvironmentConfig.get_bool(f"{ENV_PREFIX}DB_ECHO", False),
            busy_timeout=EnvironmentConfig.get_int(
                f"{ENV_PREFIX}DB_BUSY_TIMEOUT", DEFAULT_BUSY_TIMEOUT
            ),
            log_level=log_level,
            log_file=EnvironmentConfig.get_str(f"{ENV_PREFIX}LOG_FILE"),
            theme=EnvironmentConfig.get_str(f"{ENV_PREFIX}THEME", "system"),
        )


class LoggingConfigurator:
    """Utility class for configuring logging."""

    DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @staticmethod
    def configure_basic_logging(
        level: Union[str, LogLevel] = LogLevel.INFO,
        format_string: Optional[str] = None,
        log_file: Optional[str] = None,
    ) -> None:
        """
        Configure basic logging for the application.

        Args:
            level: Logging level
            format_string: Custom format string
            log_file: Optional log file path
        """
        if isinstance(level, LogLevel):
            level = level.value

        basic_config_args: Dict[str, Any] = {
            "level": level,
            "format": format_string or LoggingConfigurator.DEFAULT_FORMAT,
            "datefmt": "%Y-%m-%d %H:%M:%S",
        }

        if log_file:
            basic_config_args["filename"] = log_file
            basic_config_args["filemode"] = "a"

        logging.basicConfig(**basic_config_args)

    @staticmethod
    def configure_structured_logging(
        config_dict: Optional[Dict[str, Any]] = None,
        config_file: Optional[str] = None,
        level: Union[str, LogLevel] = LogLevel.INFO,
    ) -> None:
        """
        Configure structured logging using a dictionary or file.

        Args:
            config_dict: Logging configuration dictionary
            config_file: Path to logging configuration file
            level: Level for the package logger when using the default config
        """
        if isinstance(level, LogLevel):
            level = level.value

        if config_file and Path(config_file).exists():
            logging.config.fileConfig(config_file)
        elif config_dict:
            logging.config.dictConfig(config_dict)
        else:
            default_config = {
                "version": 1,
                "disable_existing_loggers": False,
                "formatters": {
                    "standard": {"format": LoggingConfigurator.DEFAULT_FORMAT},
                },
                "handlers": {
                    "console": {
                        "class": "logging.StreamHandler",
                        "level": level,
                        "formatter": "standard",
                        "stream": "ext://sys.stderr",
                    }
                },
                "loggers": {
                    "vet_exams": {
                        "level": level,
                        "handlers": ["console"],
                        "propagate": False,
                    }
                },
                "root": {"level": "WARNING", "handlers": ["console"]},
            }
            logging.config.dictConfig(default_config)
