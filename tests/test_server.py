"""
Unit tests for the server entry point (todolists.server.main).
"""

from unittest.mock import patch

import pytest
from loguru import logger

from todolists import server
from todolists.config import Config


@pytest.fixture
def warnings():
    records = []
    sink_id = logger.add(
        lambda message: records.append(message.record["message"]), level="WARNING"
    )
    yield records
    logger.remove(sink_id)


class TestMain:
    @patch("todolists.server.setup_logging")
    @patch("uvicorn.run")
    def test_keeps_loguru_handlers(self, mock_run, mock_setup):
        server.main()

        mock_setup.assert_called_once()
        args, kwargs = mock_run.call_args
        assert args[0] is server.app
        assert kwargs["log_config"] is None

    @patch("todolists.server.setup_logging")
    @patch("uvicorn.run")
    def test_warns_about_default_secret(self, mock_run, mock_setup, warnings, monkeypatch):
        monkeypatch.setattr(Config, "SESSION_SECRET", Config.DEFAULT_SESSION_SECRET)

        server.main()

        assert any("default session secret" in message for message in warnings)

    @patch("todolists.server.setup_logging")
    @patch("uvicorn.run")
    def test_custom_secret_does_not_warn(self, mock_run, mock_setup, warnings, monkeypatch):
        monkeypatch.setattr(Config, "SESSION_SECRET", "a-real-secret")

        server.main()

        assert not any("default session secret" in message for message in warnings)
