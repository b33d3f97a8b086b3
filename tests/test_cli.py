"""
Unit tests for the CLI commands (start, config).
"""

import json
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from todolists.cli import app
from todolists.config import Config

runner = CliRunner()


@pytest.fixture(autouse=True)
def no_logging_setup():
    """Keep loguru sinks pointed at the real stderr, not the runner's buffer."""
    with patch("todolists.cli.configure_logging"):
        yield


class TestCLIRoot:
    def test_help_shows_all_commands(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "start" in result.output
        assert "config" in result.output


class TestConfigCommand:
    def test_config_plain(self):
        result = runner.invoke(app, ["config"])
        assert result.exit_code == 0
        assert f"port: {Config.PORT}" in result.output

    def test_config_json(self):
        result = runner.invoke(app, ["config", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["host"] == Config.HOST
        assert "session_secret" not in data


class TestStartCommand:
    @patch("uvicorn.run")
    def test_start_runs_uvicorn(self, mock_run):
        result = runner.invoke(app, ["start", "--host", "0.0.0.0", "--port", "9000"])

        assert result.exit_code == 0
        mock_run.assert_called_once()
        args, kwargs = mock_run.call_args
        assert args[0] == "todolists.server:app"
        assert kwargs["host"] == "0.0.0.0"
        assert kwargs["port"] == 9000
        assert kwargs["reload"] is False
        assert kwargs["log_config"] is None
