from __future__ import annotations

from typing import Any, Dict, List, Optional, Protocol, Type

from .config import Config

AdapterName = str
ConfigId = str


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str, meta: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.meta = meta or {}


# ---- Ports (Hexagonal boundaries) ----
class ManifestPort(Protocol):
    """Descriptive metadata published by a connector adapter."""

    name: str
    label: str


class AdapterPort(Protocol):
    """A pluggable connector implementation identified by its manifest name."""

    options_schema: Type[Any]

    def get_manifest(self) -> ManifestPort: ...


class AdapterRegistryPort(Protocol):
    """Lookup service mapping adapter names to adapter instances."""

    def get_adapter(self, name: AdapterName) -> AdapterPort: ...  # raises AdapterNotFoundError
    def has_adapter(self, name: AdapterName) -> bool: ...
    def get_adapters(self) -> List[AdapterPort]: ...


class ConfigManagerPort(Protocol):
    """Persistence for connector configuration records."""

    def find_all(self) -> List[Config]: ...
    def find(self, config_id: ConfigId) -> Optional[Config]: ...
    def persist(self, config: Config) -> None: ...
    def remove(self, config: Config) -> None: ...
