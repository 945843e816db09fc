"""Tests for CLI application setup."""

from linkprint.config.settings import Environment, LogLevel


class TestCLIApp:
    """Application factory and global options."""

    def test_no_args_shows_help(self, cli_runner, default_app):
        result = cli_runner.invoke(default_app, [])
        assert "Usage" in result.output

    def test_help_lists_commands(self, cli_runner, default_app):
        result = cli_runner.invoke(default_app, ["--help"])

        assert result.exit_code == 0
        for command in ("inspect", "check", "want-digest"):
            assert command in result.output

    def test_injected_settings_configure_logging(
        self, cli_runner, test_settings, mocker
    ):
        """Injected Settings win over command-line options."""
        from linkprint.cli.app import create_cli_app

        setup_logging = mocker.patch("linkprint.app.setup_logging")
        app = create_cli_app(settings=test_settings)

        result = cli_runner.invoke(app, ["-v", "want-digest"])

        assert result.exit_code == 0
        setup_logging.assert_called_once_with(test_settings)

    def test_verbose_enables_debug(self, cli_runner, mocker):
        from linkprint.cli.app import create_cli_app

        setup_logging = mocker.patch("linkprint.app.setup_logging")
        result = cli_runner.invoke(create_cli_app(), ["-v", "want-digest"])

        assert result.exit_code == 0
        settings = setup_logging.call_args[0][0]
        assert settings.log_level == LogLevel.DEBUG
        assert settings.environment is Environment.PRODUCTION

    def test_default_log_level(self, cli_runner, mocker):
        from linkprint.cli.app import create_cli_app

        setup_logging = mocker.patch("linkprint.app.setup_logging")
        cli_runner.invoke(create_cli_app(), ["want-digest"])

        assert setup_logging.call_args[0][0].log_level == LogLevel.WARNING
