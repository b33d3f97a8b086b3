# src/todolists/config.py

import os

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    # Application Configuration
    TITLE = os.getenv("TODOLISTS_TITLE", "Todo Tracker")
    HOST = os.getenv("TODOLISTS_HOST", "127.0.0.1")
    PORT = int(os.getenv("TODOLISTS_PORT", "4567"))
    DEBUG = _env_bool("TODOLISTS_DEBUG", False)

    # Session cookie
    DEFAULT_SESSION_SECRET = "secret"
    SESSION_SECRET = os.getenv("TODOLISTS_SESSION_SECRET", DEFAULT_SESSION_SECRET)
    SESSION_COOKIE = os.getenv("TODOLISTS_SESSION_COOKIE", "todolists_session")
    SESSION_MAX_AGE = int(os.getenv("TODOLISTS_SESSION_MAX_AGE", str(14 * 24 * 60 * 60)))

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE = os.getenv("LOG_FILE")

    # Name constraints for lists and todos
    MIN_NAME_LENGTH = 1
    MAX_NAME_LENGTH = 100

    @classmethod
    def uses_default_secret(cls) -> bool:
        return cls.SESSION_SECRET == cls.DEFAULT_SESSION_SECRET

    @classmethod
    def as_dict(cls) -> dict:
        """Return the effective settings, leaving out the session secret."""
        return {
            "title": cls.TITLE,
            "host": cls.HOST,
            "port": cls.PORT,
            "debug": cls.DEBUG,
            "session_cookie": cls.SESSION_COOKIE,
            "session_max_age": cls.SESSION_MAX_AGE,
            "log_level": cls.LOG_LEVEL,
            "log_file": cls.LOG_FILE,
            "name_length": [cls.MIN_NAME_LENGTH, cls.MAX_NAME_LENGTH],
        }
