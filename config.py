"""
Configuration for the Whirlpool tick window engine

Runtime settings are read from the environment (a .env file is loaded if
present). The library itself never installs log handlers; applications
call setup_logging() once at startup.
"""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass
class LoggingConfig:
    """Logging settings."""
    level: str = "WARNING"
    format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    datefmt: str = '%Y-%m-%d %H:%M:%S'
    logger_name: str = "whirlpool_ticks"


# ============================================================
# ENVIRONMENT
# ============================================================

ENV_LOG_LEVEL = "WHIRLPOOL_TICKS_LOG_LEVEL"
ENV_LOG_FORMAT = "WHIRLPOOL_TICKS_LOG_FORMAT"

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULT_LOGGING = LoggingConfig()


def load_logging_config() -> LoggingConfig:
    """
    Build LoggingConfig from environment variables.

    Returns:
        LoggingConfig with env overrides applied

    Raises:
        ValueError: If the log level name is unknown
    """
    level = os.getenv(ENV_LOG_LEVEL, DEFAULT_LOGGING.level).strip().upper()
    if level not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Unknown log level: {level}. Valid levels are: {list(VALID_LOG_LEVELS)}"
        )

    return LoggingConfig(
        level=level,
        format=os.getenv(ENV_LOG_FORMAT, DEFAULT_LOGGING.format),
    )


def setup_logging(config: LoggingConfig = None) -> logging.Logger:
    """
    Attach a console handler to the package logger.

    Does nothing to handlers if the logger already has one, so repeated
    calls are safe.

    Args:
        config: Settings to apply (loaded from env when None)

    Returns:
        The configured package logger
    """
    if config is None:
        config = load_logging_config()

    logger = logging.getLogger(config.logger_name)
    logger.setLevel(config.level)

    # Create a console handler only if there is none yet
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(config.level)
        formatter = logging.Formatter(config.format, datefmt=config.datefmt)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
