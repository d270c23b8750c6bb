from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..domain.config import Config
from ..domain.errors import ConfigNotFoundError
from ..domain.ports import ConfigManagerPort, UseCaseError

logger = logging.getLogger(__name__)


@dataclass
class LoadConfig:
    """Fetch a config by id; ``required=False`` returns ``None`` for missing records."""

    manager: ConfigManagerPort

    def __call__(self, config_id: str, *, required: bool = True) -> Optional[Config]:
        config = self.manager.find(config_id)
        if config is None and required:
            err = ConfigNotFoundError(config_id)
            logger.debug("%s", err.message)
            raise UseCaseError(err.code, err.message, meta={"id": config_id})
        return config
