"""Central registry mapping adapter names to connector adapters.

Controllers call this registry to resolve the adapter a config refers to.
Lookups are case-insensitive on the manifest name.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from ..domain.errors import AdapterNotFoundError
from .base import ConnectorAdapter


class AdapterRegistry:
    """Registry for connector adapters keyed by manifest name."""

    def __init__(self, adapters: Optional[Iterable[ConnectorAdapter]] = None) -> None:
        self._adapters: Dict[str, ConnectorAdapter] = {}
        for adapter in adapters or ():
            self.add_adapter(adapter)

    @classmethod
    def default(cls) -> "AdapterRegistry":
        """Build the registry with the built-in adapters."""
        from .feed import FeedAdapter
        from .webhook import WebhookAdapter

        return cls([FeedAdapter(), WebhookAdapter()])

    def add_adapter(self, adapter: ConnectorAdapter) -> None:
        key = self._normalize_key(adapter.get_manifest().name)
        if not key:
            raise ValueError("Adapter manifest name must not be empty")
        self._adapters[key] = adapter

    def remove_adapter(self, name: str) -> None:
        self._adapters.pop(self._normalize_key(name), None)

    def get_adapter(self, name: str) -> ConnectorAdapter:
        """Return the adapter registered under ``name``."""
        adapter = self._adapters.get(self._normalize_key(name))
        if adapter is None:
            raise AdapterNotFoundError(str(name))
        return adapter

    def has_adapter(self, name: str) -> bool:
        return self._normalize_key(name) in self._adapters

    def get_adapters(self) -> List[ConnectorAdapter]:
        """Return all adapters ordered by manifest name."""
        return [self._adapters[key] for key in sorted(self._adapters)]

    @staticmethod
    def _normalize_key(name: Optional[str]) -> str:
        """Normalize mapping keys so lookups are case-insensitive and trimmed."""
        return str(name or "").strip().lower()


__all__ = ["AdapterRegistry"]
