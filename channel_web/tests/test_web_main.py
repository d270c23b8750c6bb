from __future__ import annotations

import logging
import runpy
import sys

import pytest
import uvicorn


@pytest.fixture(autouse=True)
def _restore_root_level():
    root = logging.getLogger()
    previous = root.level
    yield
    root.setLevel(previous)


def test_package_runs_as_module(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    calls = {}

    def fake_run(app, **kwargs):
        calls["app"] = app
        calls.update(kwargs)

    monkeypatch.setattr(uvicorn, "run", fake_run)
    monkeypatch.setattr(sys, "argv", ["channel_web", "--port", "9001", "--log-level", "warning"])
    monkeypatch.setenv("CHANNEL_CONFIG_PATH", str(tmp_path / "configs.json"))
    monkeypatch.setenv("CHANNEL_SECRET_KEY", "test-secret")
    monkeypatch.delenv("CHANNEL_LOG_LEVEL", raising=False)
    monkeypatch.delenv("CHANNEL_DEBUG", raising=False)

    runpy.run_module("channel_web", run_name="__main__")

    assert calls["host"] == "127.0.0.1"
    assert calls["port"] == 9001
    assert calls["log_level"] == logging.WARNING
    assert calls["app"].url_path_for("channel_config_index") == "/channel/config/"
