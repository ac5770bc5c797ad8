"""Logging configuration for the application."""

import logging
import sys

from blog.config import Settings

# Libraries that are chatty at INFO
_NOISY_LOGGERS = ("sqlalchemy.engine", "passlib", "asyncio")


def setup_logging(settings: Settings) -> None:
    """Configure standard library logging.

    Logfire carries spans and events; this covers modules that log through
    ``logging`` directly, such as the translation loader.

    Args:
        settings: Application settings
    """
    if settings.debug:
        level = logging.DEBUG
    elif settings.environment == "production":
        level = logging.WARNING
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing configuration
    )

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("blog").setLevel(level)

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the application's namespace."""
    return logging.getLogger(name)
