"""CLI state container."""

from ..app import App, create_app
from ..config.settings import Settings


class CLIState:
    """Application state container for CLI commands.

    Holds Settings and the wired App shared by all commands.
    """

    def __init__(self, settings: Settings, app: App | None = None):
        self.settings = settings
        self.app = app or create_app(settings)
