"""Adapters: connector implementations, their registry, and config persistence."""

from .base import AdapterOptions, ConnectorAdapter, Manifest
from .config_store import JsonConfigManager
from .registry import AdapterRegistry

__all__ = [
    "AdapterOptions",
    "AdapterRegistry",
    "ConnectorAdapter",
    "JsonConfigManager",
    "Manifest",
]
