"""Domain-level error types for use-case and adapter mapping.

These errors cross layer boundaries without leaking transport-specific
details; the web layer decides which HTTP status each one becomes.
"""

from __future__ import annotations


class ChannelError(Exception):
    """Base class for connector configuration failures."""

    code = "CHANNEL_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class AdapterNotFoundError(ChannelError):
    """Requested adapter name is not registered."""

    code = "ADAPTER_NOT_FOUND"

    def __init__(self, name: str) -> None:
        super().__init__(f"Adapter not found: {name}")
        self.name = name


class ConfigNotFoundError(ChannelError):
    """Requested config id does not resolve to a stored record."""

    code = "CONFIG_NOT_FOUND"

    def __init__(self, config_id: str) -> None:
        super().__init__(f"Config not found: {config_id}")
        self.config_id = config_id


class ConfigStorageError(ChannelError):
    """The config store could not be written."""

    code = "CONFIG_STORAGE_FAILED"


__all__ = [
    "AdapterNotFoundError",
    "ChannelError",
    "ConfigNotFoundError",
    "ConfigStorageError",
]
