"""CLI application factory."""

from typing import Optional

import typer

from ..config.settings import Environment, LogLevel, Settings, build_settings
from .commands import check, inspect, want_digest
from .state import CLIState


def create_cli_app(settings: Settings | None = None) -> typer.Typer:
    """Create CLI application with optional settings override.

    Args:
        settings: Optional Settings override for testing

    Returns:
        Configured Typer application with commands registered
    """
    app = typer.Typer(
        name="linkprint",
        help="Inspect link fingerprints, checksums and canonical download URLs",
        no_args_is_help=True,
    )

    @app.callback()
    def setup(
        ctx: typer.Context,
        charset: Optional[str] = typer.Option(
            None,
            "--charset",
            "-c",
            help="Charset of the page URLs were taken from",
        ),
        verbose: bool = typer.Option(
            False,
            "--verbose",
            "-v",
            help="Enable verbose output (DEBUG logging)",
        ),
    ) -> None:
        """Global options available to all commands."""
        if settings is not None:
            resolved_settings = settings
        else:
            resolved_settings = build_settings(
                environment=Environment.PRODUCTION,
                default_charset=charset,
                log_level=LogLevel.DEBUG if verbose else LogLevel.WARNING,
            )

        ctx.obj = CLIState(resolved_settings)

    app.command("inspect")(inspect)
    app.command("check")(check)
    app.command("want-digest")(want_digest)
    return app


def main() -> None:
    create_cli_app()()
