from dataclasses import dataclass, field

from .config.settings import Settings
from .domain.series import SeriesCounter
from .infrastructure.logging import setup_logging


@dataclass(frozen=True)
class App:
    """Application wiring container.

    Holds references to cross-cutting concerns: ``Settings`` and the shared
    series counter. Tests build one with explicit ``Settings``.
    """

    settings: Settings
    series: SeriesCounter = field(default_factory=SeriesCounter)


def create_app(settings: Settings | None = None) -> App:
    """Create an `App` with provided settings or defaults.

    Configures logging from the settings; keep anything else out of here so
    boot stays predictable and test-friendly.
    """
    settings = settings or Settings()
    setup_logging(settings)
    return App(settings=settings, series=SeriesCounter(digits=settings.series_digits))
