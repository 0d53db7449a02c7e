import io
import logging

import pydantic
import pytest

from eventsync.core.config import FeedbackLimits, load_settings
from eventsync.core.logger import configure_logging, get_logger


def test_defaults():
    settings = load_settings(_env_file=None)
    assert settings.limits() == FeedbackLimits(word_limit=300, char_cap=2000, token_cap=512)
    assert settings.HF_SENTIMENT_MODEL == "cardiffnlp/twitter-roberta-base-sentiment"
    assert settings.OPENROUTER_MODEL == "mistralai/mistral-7b-instruct"
    assert settings.STORAGE == "memory"


def test_env_prefix(monkeypatch):
    monkeypatch.setenv("EVENTSYNC_WORD_LIMIT", "5")
    monkeypatch.setenv("eventsync_token_cap", "7")
    settings = load_settings(_env_file=None)
    assert settings.limits().word_limit == 5
    assert settings.limits().token_cap == 7


def test_overrides_win(monkeypatch):
    monkeypatch.setenv("EVENTSYNC_CHAR_CAP", "50")
    settings = load_settings(CHAR_CAP=10, _env_file=None)
    assert settings.CHAR_CAP == 10


def test_child_loggers_share_package_logger():
    log = get_logger("sentiment")
    assert log.name == "eventsync.sentiment"
    configure_logging("warning")
    assert get_logger().level == logging.WARNING
    configure_logging("INFO")


@pytest.mark.parametrize("field", ["WORD_LIMIT", "CHAR_CAP", "TOKEN_CAP"])
@pytest.mark.parametrize("value", [0, -3])
def test_limits_must_be_positive(field, value):
    with pytest.raises(pydantic.ValidationError):
        load_settings(**{field: value}, _env_file=None)


def test_negative_limit_from_env_is_rejected(monkeypatch):
    monkeypatch.setenv("EVENTSYNC_CHAR_CAP", "-3")
    with pytest.raises(pydantic.ValidationError):
        load_settings(_env_file=None)


@pytest.mark.parametrize(
    "kwargs",
    [{"word_limit": 0}, {"char_cap": -3}, {"token_cap": 0}, {"word_limit": 2.5}, {"char_cap": True}],
)
def test_feedback_limits_reject_non_positive(kwargs):
    with pytest.raises(ValueError):
        FeedbackLimits(**kwargs)


def test_configure_logging_writes_formatted_lines_once():
    buf = io.StringIO()
    try:
        configure_logging("DEBUG", stream=buf)
        configure_logging("DEBUG", stream=buf)
        get_logger("ingest").debug("stored %s", 3)
        lines = buf.getvalue().splitlines()
        assert len(lines) == 1
        assert lines[0].endswith("[DEBUG] eventsync.ingest - stored 3")
    finally:
        configure_logging("INFO")
