import logging

from radix85.utils import logging as radix85_logging
from radix85.utils.logging import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV


def test_default_log_level_is_info(monkeypatch):
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))

    radix85_logging.configure_logging()

    assert DEFAULT_LOG_LEVEL == "INFO"
    assert calls["level"] == logging.INFO


def test_env_and_argument_override_default(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))

    monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
    radix85_logging.configure_logging()
    assert calls["level"] == logging.DEBUG

    radix85_logging.configure_logging("error")
    assert calls["level"] == logging.ERROR
