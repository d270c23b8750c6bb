from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..domain.errors import AdapterNotFoundError
from ..domain.ports import AdapterPort, AdapterRegistryPort, UseCaseError

logger = logging.getLogger(__name__)


@dataclass
class ResolveAdapter:
    """Look up an adapter by name.

    With ``required=True`` an unknown name raises ``UseCaseError`` with code
    ``ADAPTER_NOT_FOUND``; otherwise ``None`` is returned.
    """

    registry: AdapterRegistryPort

    def __call__(self, name: Optional[str], *, required: bool = True) -> Optional[AdapterPort]:
        if not required:
            if name and self.registry.has_adapter(name):
                return self.registry.get_adapter(name)
            return None
        try:
            return self.registry.get_adapter(name or "")
        except AdapterNotFoundError as e:
            logger.debug("Adapter lookup failed: %s", e)
            raise UseCaseError(e.code, e.message, meta={"adapter": name}) from e
