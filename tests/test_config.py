"""
Unit tests for configuration management.
"""
from todolists.config import Config


def test_config_name_limits():
    assert Config.MIN_NAME_LENGTH == 1
    assert Config.MAX_NAME_LENGTH == 100


def test_config_as_dict_hides_secret():
    settings = Config.as_dict()

    assert settings["port"] == Config.PORT
    assert settings["session_cookie"] == Config.SESSION_COOKIE
    assert "session_secret" not in settings
    assert Config.SESSION_SECRET not in [str(v) for v in settings.values()]
