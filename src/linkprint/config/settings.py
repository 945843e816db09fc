import enum
from dataclasses import dataclass, fields
from typing import Any


class Environment(enum.Enum):
    """Runtime environment for the application.

    Kept small and explicit to support simple environment-driven behavior
    without introducing configuration dependencies.
    """

    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(enum.StrEnum):
    """Log levels understood by the logging setup."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


@dataclass(frozen=True)
class Settings:
    """Settings container used to bootstrap the app.

    Core code depends on this shape only; the app/CLI layer decides how
    values are populated.
    """

    environment: Environment = Environment.DEVELOPMENT
    log_level: LogLevel = LogLevel.INFO
    # Charset assumed for URL text that carries no origin charset
    default_charset: str = "UTF-8"
    default_preference: float = 100
    series_digits: int = 3


def build_settings(**overrides: Any) -> Settings:
    """Build Settings from keyword overrides, ignoring ``None`` values.

    Unknown keys raise ``TypeError`` just like the dataclass constructor.

    Examples:
        >>> build_settings(log_level=LogLevel.DEBUG, default_charset=None).log_level
        <LogLevel.DEBUG: 'DEBUG'>
    """
    known = {field.name for field in fields(Settings)}
    unknown = set(overrides) - known
    if unknown:
        raise TypeError(f"Unknown settings: {', '.join(sorted(unknown))}")
    applied = {key: value for key, value in overrides.items() if value is not None}
    return Settings(**applied)
