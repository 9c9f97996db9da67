"""
Tests for settings loading and the JSON log formatter.
"""
import json
import logging
import sys

from gamereview.core.config import Settings
from gamereview.core.logging import JSONFormatter


def test_settings_defaults(monkeypatch):
    for name in ("DATABASE_URL", "ACTIVATION_TOKEN_LENGTH", "DEBUG"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.DATABASE_URL.startswith("sqlite")
    assert settings.ACTIVATION_TOKEN_LENGTH == 32
    assert settings.DEBUG is False


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql+psycopg2://u:p@db/reviews")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    settings = Settings(_env_file=None)

    assert settings.DATABASE_URL == "postgresql+psycopg2://u:p@db/reviews"
    assert settings.LOG_LEVEL == "DEBUG"


def test_json_formatter_includes_extra_fields():
    record = logging.LogRecord(
        name="gamereview",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Review inserted",
        args=(),
        exc_info=None,
    )
    record.review_id = "abc"

    payload = json.loads(JSONFormatter().format(record))

    assert payload["message"] == "Review inserted"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "gamereview"
    assert payload["review_id"] == "abc"
    assert payload["source"]["line"] == 1
    assert "exception" not in payload


def test_json_formatter_renders_exceptions():
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = logging.LogRecord(
            "gamereview", logging.ERROR, __file__, 2, "Storage operation failed", (), sys.exc_info()
        )

    payload = json.loads(JSONFormatter().format(record))

    assert "RuntimeError: boom" in payload["exception"]
