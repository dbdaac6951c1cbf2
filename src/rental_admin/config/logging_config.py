"""Centralized logging configuration.

Stdlib loggers are configured through ``dictConfig``; the loguru sink used by
feature services and repositories is pointed at the same level.
"""

import logging
import logging.config
import sys
from enum import Enum
from typing import Optional

from loguru import logger as loguru_logger

from .settings import Settings, get_settings


class LogLevel(str, Enum):
    """Supported log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogVerbosity(str, Enum):
    """Log verbosity modes."""
    QUIET = "QUIET"      # Only errors and critical
    NORMAL = "NORMAL"    # Configured LOG_LEVEL
    VERBOSE = "VERBOSE"  # Info level logging
    DEBUG = "DEBUG"      # Full debug logging


def get_log_level(settings: Settings) -> str:
    """Map verbosity mode to an effective log level."""
    try:
        verbosity = LogVerbosity(settings.log_verbosity.upper())
    except ValueError:
        verbosity = LogVerbosity.NORMAL

    if verbosity == LogVerbosity.QUIET:
        return LogLevel.ERROR.value
    if verbosity == LogVerbosity.VERBOSE:
        return LogLevel.INFO.value
    if verbosity == LogVerbosity.DEBUG:
        return LogLevel.DEBUG.value
    return settings.log_level.upper()


class LoggingConfig:
    """Centralized logging configuration manager."""

    # Modules that should only log errors
    ERROR_ONLY_MODULES = [
        "httpx",
        "httpcore",
        "asyncio",
    ]

    # Modules that stay at WARNING unless running in debug
    QUIET_MODULES = [
        "asyncpg",
        "uvicorn.access",
    ]

    @classmethod
    def configure(cls, settings: Optional[Settings] = None) -> None:
        """Configure stdlib and loguru logging from settings."""
        settings = settings or get_settings()
        effective_log_level = get_log_level(settings)

        logging_config = {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": effective_log_level,
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "root": {
                "level": effective_log_level,
                "handlers": ["console"],
            },
            "loggers": {},
        }

        for module in cls.QUIET_MODULES:
            logging_config["loggers"][module] = {
                "level": "WARNING" if effective_log_level != "DEBUG" else "DEBUG",
                "handlers": ["console"],
                "propagate": False,
            }

        for module in cls.ERROR_ONLY_MODULES:
            logging_config["loggers"][module] = {
                "level": "ERROR",
                "handlers": ["console"],
                "propagate": False,
            }

        logging.config.dictConfig(logging_config)

        loguru_logger.remove()
        loguru_logger.add(sys.stderr, level=effective_log_level, format=settings.log_format)
        if settings.log_file:
            loguru_logger.add(
                settings.log_file,
                level=effective_log_level,
                format=settings.log_format,
                rotation=settings.log_rotation,
                retention=settings.log_retention,
            )

        if effective_log_level == "DEBUG":
            logging.getLogger(__name__).debug(
                f"Logging configured: level={effective_log_level}, file={settings.log_file}"
            )

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Get a configured logger for the given module name."""
        return logging.getLogger(name)


def setup_logging(settings: Optional[Settings] = None) -> None:
    """Setup logging configuration.

    This should be called once at application startup.
    """
    LoggingConfig.configure(settings)
