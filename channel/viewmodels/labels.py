"""Label catalogue for form buttons and field captions."""

from __future__ import annotations

from typing import Dict, Mapping, Optional

CHANNEL_DOMAIN = "channel"

_CATALOGUE: Dict[str, Dict[str, str]] = {
    CHANNEL_DOMAIN: {
        "form.actions.create": "Create",
        "form.actions.save": "Save",
        "form.actions.delete": "Delete",
        "form.actions.cancel": "Cancel",
        "form.config.name": "Name",
        "form.config.adapter": "Adapter",
    },
}


def translate(key: str, domain: Optional[str] = None, catalogue: Optional[Mapping[str, Mapping[str, str]]] = None) -> str:
    """Return the label for ``key`` in ``domain``, falling back to the key itself."""
    messages = (catalogue or _CATALOGUE).get(domain or CHANNEL_DOMAIN, {})
    return messages.get(key, key)


__all__ = ["CHANNEL_DOMAIN", "translate"]
