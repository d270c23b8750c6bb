"""ViewModel package for config form state and action buttons.

Call context:
    ``channel_web/app.py`` builds one form view model per request and hands
    it to the templates.

Dependencies:
    Modules in this package depend on domain types and pydantic option
    schemas only. Persistence and HTTP handling remain outside.
"""

from .actions import CHANNEL_ACTIONS, ActionButton, ActionsType
from .config_form_vm import ConfigFormVM, FieldView

__all__ = ["ActionButton", "ActionsType", "CHANNEL_ACTIONS", "ConfigFormVM", "FieldView"]
