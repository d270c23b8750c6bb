from __future__ import annotations

import logging

import pytest

from channel.utils.logging import configure_root, env_truthy, level_name, parse_logger_levels


@pytest.fixture(autouse=True)
def _restore_root_level():
    root = logging.getLogger()
    previous = root.level
    yield
    root.setLevel(previous)


def test_env_level_overrides_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CHANNEL_LOG_LEVEL", "warning")
    monkeypatch.delenv("CHANNEL_DEBUG", raising=False)
    assert configure_root(logging.INFO) == logging.WARNING
    assert logging.getLogger().level == logging.WARNING


def test_debug_flag_forces_debug(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CHANNEL_LOG_LEVEL", raising=False)
    monkeypatch.setenv("CHANNEL_DEBUG", "yes")
    assert configure_root("INFO") == logging.DEBUG


def test_invalid_default_level_falls_back_to_info(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CHANNEL_LOG_LEVEL", raising=False)
    monkeypatch.delenv("CHANNEL_DEBUG", raising=False)
    assert configure_root("chatty") == logging.INFO
    assert level_name(logging.INFO) == "INFO"


@pytest.mark.parametrize(
    ("value", "default", "expected"),
    [(None, True, True), ("", False, False), ("on", False, True), ("0", True, False), ("TRUE", False, True)],
)
def test_env_truthy(value, default, expected) -> None:
    assert env_truthy(value, default=default) is expected


def test_per_logger_levels_applied() -> None:
    access = logging.getLogger("uvicorn.access")
    previous = access.level
    try:
        level = configure_root(
            logging.INFO,
            environ={"CHANNEL_LOG_LEVELS": "uvicorn.access=warning, bogus, =DEBUG, x=loud"},
        )
        assert level == logging.INFO
        assert access.level == logging.WARNING
    finally:
        access.setLevel(previous)


def test_parse_logger_levels() -> None:
    assert parse_logger_levels("a=DEBUG,b=30,c=nope,d") == {"a": logging.DEBUG, "b": 30}
    assert parse_logger_levels(None) == {}


def test_invalid_env_level_keeps_default() -> None:
    assert configure_root("ERROR", environ={"CHANNEL_LOG_LEVEL": "chatty"}) == logging.ERROR
