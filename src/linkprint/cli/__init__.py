"""Command-line interface."""

from .app import create_cli_app

__all__ = ["create_cli_app"]
