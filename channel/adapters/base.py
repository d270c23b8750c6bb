"""Base types for connector adapters.

An adapter publishes a :class:`Manifest` and a pydantic options schema. The
schema drives the adapter-specific part of the new/edit config forms.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Type

from pydantic import BaseModel, ConfigDict


@dataclass(frozen=True)
class Manifest:
    """Descriptive metadata for a registered adapter."""

    name: str
    label: str
    description: str = ""
    version: str = "1.0"


class AdapterOptions(BaseModel):
    """Base schema for adapter-specific settings."""

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)


class ConnectorAdapter:
    """Base class for connector adapters known to the registry."""

    manifest: ClassVar[Manifest]
    options_schema: ClassVar[Type[AdapterOptions]] = AdapterOptions

    def get_manifest(self) -> Manifest:
        return self.manifest

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.manifest.name!r})"


__all__ = ["AdapterOptions", "ConnectorAdapter", "Manifest"]
