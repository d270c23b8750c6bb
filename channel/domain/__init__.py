"""Domain package exports for connector configuration records and ports."""

from .config import Config, is_valid_name
from .errors import (
    AdapterNotFoundError,
    ChannelError,
    ConfigNotFoundError,
    ConfigStorageError,
)
from .ports import (
    AdapterPort,
    AdapterRegistryPort,
    ConfigManagerPort,
    UseCaseError,
)

__all__ = [
    "AdapterNotFoundError",
    "AdapterPort",
    "AdapterRegistryPort",
    "ChannelError",
    "Config",
    "ConfigManagerPort",
    "ConfigNotFoundError",
    "ConfigStorageError",
    "UseCaseError",
    "is_valid_name",
]
