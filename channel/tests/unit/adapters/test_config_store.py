from __future__ import annotations

import json
from pathlib import Path

import pytest

from channel.adapters.config_store import JsonConfigManager
from channel.domain.config import Config
from channel.domain.errors import ConfigStorageError


def test_persist_then_find_roundtrip(tmp_path: Path) -> None:
    manager = JsonConfigManager(tmp_path / "configs.json")
    manager.persist(Config(name="news", adapter="feed", options={"item_limit": 5}))

    found = manager.find("news")
    assert found is not None
    assert found.name == "news"
    assert found.adapter == "feed"
    assert found.options == {"item_limit": 5}


def test_records_survive_a_new_manager(tmp_path: Path) -> None:
    path = tmp_path / "configs.json"
    JsonConfigManager(path).persist(Config(name="push", adapter="webhook"))

    reloaded = JsonConfigManager(path)
    assert [c.name for c in reloaded.find_all()] == ["push"]
    stored = json.loads(path.read_text(encoding="utf-8"))
    assert stored["configs"][0]["adapter"] == "webhook"
    assert not path.with_suffix(".tmp").exists()


def test_find_all_is_sorted_and_returns_copies() -> None:
    manager = JsonConfigManager()
    manager.persist(Config(name="b", adapter="feed"))
    manager.persist(Config(name="a", adapter="feed"))

    configs = manager.find_all()
    assert [c.name for c in configs] == ["a", "b"]

    configs[0].adapter = "changed"
    assert manager.find("a").adapter == "feed"


def test_remove_missing_record_is_noop(tmp_path: Path) -> None:
    manager = JsonConfigManager(tmp_path / "configs.json")
    manager.remove(Config(name="ghost"))
    assert manager.find_all() == []
    assert not (tmp_path / "configs.json").exists()


def test_remove_deletes_record(tmp_path: Path) -> None:
    manager = JsonConfigManager(tmp_path / "configs.json")
    manager.persist(Config(name="news", adapter="feed"))
    manager.remove(Config(name="news"))
    assert manager.find("news") is None
    assert JsonConfigManager(tmp_path / "configs.json").find_all() == []


def test_persist_requires_name() -> None:
    with pytest.raises(ValueError):
        JsonConfigManager().persist(Config(adapter="feed"))


@pytest.mark.parametrize("content", ["not json", "[]", '{"configs": "x"}'])
def test_unreadable_store_degrades_to_empty(tmp_path: Path, content: str) -> None:
    path = tmp_path / "configs.json"
    path.write_text(content, encoding="utf-8")
    assert JsonConfigManager(path).find_all() == []


def test_write_failure_keeps_memory_unchanged(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    manager = JsonConfigManager(blocker / "configs.json")

    with pytest.raises(ConfigStorageError):
        manager.persist(Config(name="news", adapter="feed"))
    assert manager.find("news") is None
