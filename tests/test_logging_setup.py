import io
import logging

import pytest

from spend_summary.logging_setup import configure_logging, get_logger


def test_get_logger_is_silent_until_configured():
    logger = get_logger("spend_summary.test")
    pkg = logging.getLogger("spend_summary")
    assert any(isinstance(h, logging.NullHandler) for h in pkg.handlers)
    assert logger.name == "spend_summary.test"


def test_configure_logging_writes_to_stream_once():
    stream = io.StringIO()
    configure_logging("DEBUG", fmt="%(levelname)s %(message)s", stream=stream)
    # A second call is a no-op.
    configure_logging("ERROR", stream=io.StringIO())

    get_logger("spend_summary.test").debug("hello %s", "there")
    assert stream.getvalue() == "DEBUG hello there\n"


def test_configure_logging_level_from_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("SPEND_SUMMARY_LOG_LEVEL", "warning")
    stream = io.StringIO()
    configure_logging(fmt="%(message)s", stream=stream)

    log = get_logger("spend_summary.test")
    log.info("hidden")
    log.warning("shown")
    assert stream.getvalue() == "shown\n"


def test_configure_logging_defaults_to_info():
    stream = io.StringIO()
    configure_logging(fmt="%(message)s", stream=stream)
    log = get_logger("spend_summary.test")
    log.debug("hidden")
    log.info("shown")
    assert stream.getvalue() == "shown\n"


@pytest.mark.parametrize("raw", ["verbose", "Loud", "  "])
def test_configure_logging_unknown_env_level_falls_back_to_info(
    monkeypatch: pytest.MonkeyPatch, raw: str
):
    monkeypatch.setenv("SPEND_SUMMARY_LOG_LEVEL", raw)
    configure_logging(stream=io.StringIO())
    assert logging.getLogger("spend_summary").level == logging.INFO


def test_configure_logging_unknown_argument_uses_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("SPEND_SUMMARY_LOG_LEVEL", "error")
    configure_logging("chatty", stream=io.StringIO())
    assert logging.getLogger("spend_summary").level == logging.ERROR


def test_configure_logging_numeric_level_string(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("SPEND_SUMMARY_LOG_LEVEL", "30")
    configure_logging(stream=io.StringIO())
    assert logging.getLogger("spend_summary").level == logging.WARNING
