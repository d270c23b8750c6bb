"""JSON-backed config manager.

Records are kept in an in-memory mapping of ``name -> Config`` and mirrored to
a single JSON file so configurations survive process restarts. Without a path
the manager is purely in-memory.
"""

from __future__ import annotations

import json
import logging
import pathlib
import threading
from typing import Dict, List, Optional

from ..domain.config import Config
from ..domain.errors import ConfigStorageError
from ..domain.ports import ConfigManagerPort

logger = logging.getLogger(__name__)


class JsonConfigManager(ConfigManagerPort):
    """Config persistence with atomic JSON writes.

    Parameters
    ----------
    path : Optional[pathlib.Path]
        Location of the JSON index. ``None`` keeps records in memory only.
    """

    def __init__(self, path: Optional[pathlib.Path] = None) -> None:
        self.path = pathlib.Path(path) if path is not None else None
        self._lock = threading.Lock()
        self._configs: Dict[str, Config] = {}
        if self.path is not None:
            self._configs = self._load(self.path)

    def find_all(self) -> List[Config]:
        """Return copies of all records ordered by name."""
        with self._lock:
            return [self._copy(self._configs[key]) for key in sorted(self._configs)]

    def find(self, config_id: str) -> Optional[Config]:
        """Return a copy of the record named ``config_id`` or ``None``."""
        with self._lock:
            config = self._configs.get(config_id)
            return self._copy(config) if config is not None else None

    def persist(self, config: Config) -> None:
        """Insert or replace ``config`` keyed by its name.

        Raises
        ------
        ValueError
            If the config has no name.
        ConfigStorageError
            If the JSON index cannot be written; memory is left unchanged.
        """
        if not config.name:
            raise ValueError("Config name must not be empty")
        with self._lock:
            updated = dict(self._configs)
            updated[config.name] = self._copy(config)
            self._write_unlocked(updated)
            self._configs = updated

    def remove(self, config: Config) -> None:
        """Delete the record with the same name; missing records are ignored."""
        with self._lock:
            if config.name not in self._configs:
                return
            updated = dict(self._configs)
            updated.pop(config.name, None)
            self._write_unlocked(updated)
            self._configs = updated

    @staticmethod
    def _copy(config: Config) -> Config:
        return Config.from_payload(config.to_payload())

    @staticmethod
    def _load(path: pathlib.Path) -> Dict[str, Config]:
        """Load records from disk; unreadable content degrades to an empty store."""
        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as exc:
            logger.warning("Could not read config store %s: %s", path, exc)
            return {}
        try:
            data = json.loads(raw)
        except ValueError as exc:
            logger.warning("Config store %s is not valid JSON: %s", path, exc)
            return {}
        entries = data.get("configs") if isinstance(data, dict) else None
        if not isinstance(entries, list):
            logger.warning("Config store %s has no config list", path)
            return {}
        configs: Dict[str, Config] = {}
        for entry in entries:
            if not isinstance(entry, dict):
                continue
            config = Config.from_payload(entry)
            if isinstance(config.name, str) and config.name:
                configs[config.name] = config
        return configs

    def _write_unlocked(self, configs: Dict[str, Config]) -> None:
        """Write the index atomically via a temporary file."""
        if self.path is None:
            return
        payload = {"configs": [configs[key].to_payload() for key in sorted(configs)]}
        tmp = self.path.with_suffix(".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
            tmp.replace(self.path)
        except OSError as exc:
            raise ConfigStorageError(f"Could not write config store {self.path}: {exc}") from exc


__all__ = ["JsonConfigManager"]
