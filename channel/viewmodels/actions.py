"""Declarative registry of form action buttons.

A form picks a subset of the registered buttons (e.g. ``["create", "cancel"]``);
the clicked button name is submitted as the value of the ``actions`` field.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .labels import CHANNEL_DOMAIN, translate

DEFAULT_BUTTON_CLASS = "primary"


@dataclass(frozen=True)
class ActionButton:
    """A single named submit button."""

    name: str
    label: str
    translation_domain: Optional[str] = None
    button_class: Optional[str] = None
    type: str = "submit"

    @property
    def text(self) -> str:
        return translate(self.label, self.translation_domain)

    @property
    def css_class(self) -> str:
        return self.button_class or DEFAULT_BUTTON_CLASS


class ActionsType:
    """Named collection of button definitions.

    ``buttons`` maps a button name to ``{"type": ..., "options": {...}}`` where
    the options carry ``label``, ``translation_domain`` and ``button_class``.
    """

    def __init__(self, name: str, buttons: Mapping[str, Mapping[str, Any]]) -> None:
        self.name = name
        self._buttons: Dict[str, ActionButton] = {}
        for button_name, definition in buttons.items():
            options = dict(definition.get("options") or {})
            self._buttons[button_name] = ActionButton(
                name=button_name,
                label=options.get("label", button_name),
                translation_domain=options.get("translation_domain"),
                button_class=options.get("button_class"),
                type=definition.get("type", "submit"),
            )

    def names(self) -> List[str]:
        return list(self._buttons)

    def get(self, name: str) -> ActionButton:
        try:
            return self._buttons[name]
        except KeyError:
            raise ValueError(f"Unknown action button: {name}") from None

    def group(self, names: Iterable[str]) -> List[ActionButton]:
        """Return the buttons for ``names`` in the requested order."""
        return [self.get(name) for name in names]


def _submit(label: str, **extra: Any) -> Dict[str, Any]:
    return {
        "type": "submit",
        "options": {"label": label, "translation_domain": CHANNEL_DOMAIN, **extra},
    }


CHANNEL_ACTIONS = ActionsType(
    "channel_actions",
    {
        "create": _submit("form.actions.create"),
        "save": _submit("form.actions.save"),
        "delete": _submit("form.actions.delete", button_class="danger"),
        "cancel": _submit("form.actions.cancel", button_class="default"),
    },
)

__all__ = ["ActionButton", "ActionsType", "CHANNEL_ACTIONS"]
