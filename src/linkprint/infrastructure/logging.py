"""Logging setup built on loguru.

Components ask for a logger with ``get_logger(__name__)``. The first call
configures loguru with defaults unless ``setup_logging`` ran earlier.
"""

import sys
import typing as t

from loguru import logger

from ..config.settings import Environment, LogLevel, Settings

if t.TYPE_CHECKING:
    import loguru

_DEVELOPMENT_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan> - <level>{message}</level> | {extra}"
)
_PRODUCTION_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[name]} - {message}"
)

_configured = False


def configure_logger(
    level: LogLevel = LogLevel.INFO,
    environment: Environment = Environment.DEVELOPMENT,
) -> None:
    """Install a single stderr sink for the given level and environment."""
    global _configured

    logger.remove()
    logger.configure(extra={"name": "linkprint"})
    if environment is Environment.PRODUCTION:
        logger.add(
            sys.stderr,
            level=str(level),
            format=_PRODUCTION_FORMAT,
            backtrace=False,
            diagnose=False,
        )
    else:
        logger.add(
            sys.stderr,
            level=str(level),
            format=_DEVELOPMENT_FORMAT,
            colorize=environment is Environment.DEVELOPMENT,
            backtrace=True,
            diagnose=environment is Environment.DEVELOPMENT,
        )
    _configured = True


def setup_logging(settings: Settings) -> None:
    """Configure logging from application settings."""
    configure_logger(level=settings.log_level, environment=settings.environment)


def is_configured() -> bool:
    """Return True once a sink has been installed."""
    return _configured


def get_logger(name: str) -> "loguru.Logger":
    """Return a logger bound to ``name``, configuring defaults on first use."""
    if not _configured:
        configure_logger()
    return logger.bind(name=name)


def reset_logging() -> None:
    """Drop all sinks so the next ``get_logger`` call reconfigures."""
    global _configured

    logger.remove()
    _configured = False
