"""Shared fixtures for CLI tests."""

import pytest
from typer.testing import CliRunner

from linkprint.cli.app import create_cli_app


@pytest.fixture
def cli_runner():
    """Provide Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def test_cli_app(test_settings):
    """Provide CLI app with test settings injected."""
    return create_cli_app(settings=test_settings)


@pytest.fixture
def default_app():
    """Provide CLI app with default settings."""
    return create_cli_app()
