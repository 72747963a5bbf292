"""
Utility functions and helper modules.

This module provides configuration management and logging setup shared by
the data layer and the application shell.
"""

from .config import (
    AppConfig,
    ConfigError,
    EnvironmentConfig,
    LoggingConfigurator,
    LogLevel,
)

__all__ = [
    # Configuration utilities
    "AppConfig",
    "ConfigError",
    "EnvironmentConfig",
    "LoggingConfigurator",
    "LogLevel",
]
