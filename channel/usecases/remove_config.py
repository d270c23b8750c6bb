from __future__ import annotations

import logging
from dataclasses import dataclass

from ..domain.config import Config
from ..domain.errors import ConfigStorageError
from ..domain.ports import ConfigManagerPort, UseCaseError

logger = logging.getLogger(__name__)


@dataclass
class RemoveConfig:
    manager: ConfigManagerPort

    def __call__(self, config: Config) -> None:
        try:
            self.manager.remove(config)
        except ConfigStorageError as e:
            raise UseCaseError("REMOVE_CONFIG_FAILED", str(e))
        logger.info("Removed config %s", config.name)
