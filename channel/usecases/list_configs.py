from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from ..domain.config import Config
from ..domain.ports import AdapterPort, AdapterRegistryPort, ConfigManagerPort


@dataclass(frozen=True)
class ConfigRow:
    """A config annotated with its adapter, or ``None`` when it is no longer registered."""

    config: Config
    adapter: Optional[AdapterPort]


@dataclass
class ListConfigs:
    manager: ConfigManagerPort
    registry: AdapterRegistryPort

    def __call__(self) -> List[ConfigRow]:
        rows: List[ConfigRow] = []
        for config in self.manager.find_all():
            adapter = (
                self.registry.get_adapter(config.adapter)
                if config.adapter and self.registry.has_adapter(config.adapter)
                else None
            )
            rows.append(ConfigRow(config=config, adapter=adapter))
        return rows
