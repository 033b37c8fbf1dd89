"""
Tests for configuration helpers.
"""
import logging

from config import DEFAULT_TOLERANCE, get_log_level, setup_logging, utc_now


def test_log_level_from_env(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert get_log_level() == logging.DEBUG


def test_log_level_defaults_to_info(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    assert get_log_level() == logging.INFO


def test_unknown_log_level_falls_back(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    assert get_log_level() == logging.INFO


def test_setup_logging_passes_level(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    monkeypatch.setenv("LOG_LEVEL", "ERROR")

    setup_logging(logging.WARNING)
    setup_logging()

    assert [c["level"] for c in calls] == [logging.WARNING, logging.ERROR]
    assert "%(name)s" in calls[0]["format"]


def test_defaults():
    assert DEFAULT_TOLERANCE == 0.01
    assert utc_now().tzinfo is not None
