from __future__ import annotations

import logging
from dataclasses import dataclass

from ..domain.config import Config
from ..domain.errors import ConfigStorageError
from ..domain.ports import ConfigManagerPort, UseCaseError

logger = logging.getLogger(__name__)


@dataclass
class SaveConfig:
    manager: ConfigManagerPort

    def __call__(self, config: Config) -> None:
        try:
            self.manager.persist(config)
        except ConfigStorageError as e:
            raise UseCaseError("SAVE_CONFIG_FAILED", str(e))
        logger.info("Saved config %s (adapter=%s)", config.name, config.adapter)
