"""Connector configuration record shared by persistence, use cases, and view models."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

NAME_RE = re.compile(r"^[0-9A-Za-z][0-9A-Za-z_.-]{0,63}$")
# Names that collide with fixed route segments.
RESERVED_NAMES = frozenset({"new"})


@dataclass
class Config:
    """A named connector configuration bound to one adapter.

    The ``name`` is the identity of the record; ``adapter`` holds the registry
    key of the adapter that was valid when the record was created. ``options``
    carries the adapter-specific settings as plain JSON-compatible values.
    """

    name: Optional[str] = None
    adapter: Optional[str] = None
    options: Dict[str, Any] = field(default_factory=dict)

    def to_payload(self) -> Dict[str, Any]:
        """Serialize into the persisted JSON shape."""
        return {
            "name": self.name,
            "adapter": self.adapter,
            "options": dict(self.options),
        }

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Config":
        options = payload.get("options")
        return cls(
            name=payload.get("name"),
            adapter=payload.get("adapter"),
            options=dict(options) if isinstance(options, Mapping) else {},
        )


def is_valid_name(value: Optional[str]) -> bool:
    """Return True when ``value`` is usable as a config identity."""
    if not value or NAME_RE.match(value) is None:
        return False
    return value.lower() not in RESERVED_NAMES


__all__ = ["Config", "NAME_RE", "RESERVED_NAMES", "is_valid_name"]
