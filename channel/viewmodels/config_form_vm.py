"""Form state for the new/edit/delete connector config pages.

The view model binds a :class:`~channel.domain.config.Config` (and, for new and
edit forms, its adapter's options schema) to submitted form data. It performs
validation and reports per-field errors but never touches persistence.
"""

from __future__ import annotations

import hmac
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Literal, Mapping, Optional, Sequence, Tuple, Union, get_args, get_origin

from pydantic import ValidationError

from ..domain.config import Config, is_valid_name
from ..domain.ports import AdapterPort
from .actions import CHANNEL_ACTIONS, ActionButton, ActionsType
from .labels import translate

FormKind = Literal["new", "edit", "delete"]

ACTIONS_FIELD = "actions"
TOKEN_FIELD = "_token"
OPTION_PREFIX = "options."

BLANK_MESSAGE = "This value should not be blank."
NAME_FORMAT_MESSAGE = "Use up to 64 letters, digits, '_', '-' or '.', starting with a letter or digit."
NAME_TAKEN_MESSAGE = "A config with this name already exists."
CSRF_MESSAGE = "The CSRF token is invalid. Please try to resubmit the form."

_TRUTHY = {"1", "true", "on", "yes"}


@dataclass
class FieldView:
    """Render-ready description of one form input."""

    name: str
    label: str
    value: Any = ""
    input_type: str = "text"
    required: bool = False
    readonly: bool = False
    choices: Tuple[str, ...] = ()
    help: str = ""
    errors: List[str] = field(default_factory=list)


def _unwrap_optional(annotation: Any) -> Any:
    if get_origin(annotation) is Union:
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def _input_type(annotation: Any) -> Tuple[str, Tuple[str, ...]]:
    annotation = _unwrap_optional(annotation)
    if annotation is bool:
        return "checkbox", ()
    if annotation in (int, float):
        return "number", ()
    if get_origin(annotation) is Literal:
        return "select", tuple(str(arg) for arg in get_args(annotation))
    return "text", ()


class ConfigFormVM:
    """Keeps config form state and validation, no I/O here."""

    def __init__(
        self,
        kind: FormKind,
        data: Config,
        *,
        action: str,
        method: str,
        adapter: Optional[AdapterPort] = None,
        csrf_token: Optional[str] = None,
        name_exists: Optional[Callable[[str], bool]] = None,
    ) -> None:
        if kind in ("new", "edit") and adapter is None:
            raise ValueError(f"A {kind} form requires an adapter")
        self.kind = kind
        self.data = data
        self.action = action
        self.method = method.upper()
        self.adapter = adapter
        self.csrf_token = csrf_token
        self.name_exists = name_exists

        self.buttons: List[ActionButton] = []
        self.submitted = False
        self.clicked: Optional[str] = None
        self.errors: Dict[str, List[str]] = {}
        self.form_errors: List[str] = []
        self._raw: Dict[str, Any] = {}

    # ------------------------------------------------------------------
    def add_actions(self, names: Sequence[str], actions_type: ActionsType = CHANNEL_ACTIONS) -> "ConfigFormVM":
        """Attach an action-button group, e.g. ``["create", "cancel"]``."""
        self.buttons = actions_type.group(names)
        return self

    @property
    def has_method_override(self) -> bool:
        return self.method not in ("GET", "POST")

    @property
    def form_method(self) -> str:
        """Method used by the HTML ``<form>`` element."""
        return "GET" if self.method == "GET" else "POST"

    @property
    def options_schema(self) -> Any:
        return getattr(self.adapter, "options_schema", None) if self.adapter is not None else None

    # ------------------------------------------------------------------
    def fields(self) -> List[FieldView]:
        """Describe the inputs to render, carrying submitted values and errors."""
        if self.kind == "delete":
            return []
        views = [
            FieldView(
                name="name",
                label=translate("form.config.name"),
                value=self._raw.get("name", self.data.name or "") if self.kind == "new" else (self.data.name or ""),
                required=True,
                readonly=self.kind == "edit",
                errors=list(self.errors.get("name", [])),
            )
        ]
        schema = self.options_schema
        if schema is None:
            return views
        for key, info in schema.model_fields.items():
            input_type, choices = _input_type(info.annotation)
            form_key = OPTION_PREFIX + key
            if self.submitted:
                if input_type == "checkbox":
                    value: Any = self._is_checked(self._raw.get(form_key))
                else:
                    value = self._raw.get(form_key, "")
            elif key in self.data.options:
                value = self.data.options[key]
            else:
                value = "" if info.is_required() else info.default
            views.append(
                FieldView(
                    name=form_key,
                    label=info.title or key,
                    value=value,
                    input_type=input_type,
                    required=info.is_required(),
                    choices=choices,
                    help=info.description or "",
                    errors=list(self.errors.get(form_key, [])),
                )
            )
        return views

    # ------------------------------------------------------------------
    def handle_submission(self, form: Mapping[str, Any]) -> None:
        """Bind submitted values, record the clicked button, and validate."""
        self.submitted = True
        self._raw = {key: form.get(key) for key in form.keys()}
        self.errors = {}
        self.form_errors = []

        clicked = form.get(ACTIONS_FIELD)
        names = {button.name for button in self.buttons}
        self.clicked = clicked if clicked in names else None

        if self.csrf_token is not None:
            submitted = form.get(TOKEN_FIELD)
            if not isinstance(submitted, str) or not hmac.compare_digest(
                submitted.encode("utf-8"), self.csrf_token.encode("utf-8")
            ):
                self.form_errors.append(CSRF_MESSAGE)

        if self.kind == "new":
            self._validate_name(form.get("name"))
        if self.kind in ("new", "edit"):
            options = self._validate_options(form)
        else:
            options = None

        if self.is_valid():
            if self.kind == "new":
                self.data.name = str(form.get("name")).strip()
            if options is not None:
                self.data.options = options

    def is_valid(self) -> bool:
        return self.submitted and not self.errors and not self.form_errors

    # ------------------------------------------------------------------
    def _add_error(self, key: str, message: str) -> None:
        self.errors.setdefault(key, []).append(message)

    def _validate_name(self, raw: Any) -> None:
        name = str(raw or "").strip()
        if not name:
            self._add_error("name", BLANK_MESSAGE)
        elif not is_valid_name(name):
            self._add_error("name", NAME_FORMAT_MESSAGE)
        elif self.name_exists is not None and self.name_exists(name):
            self._add_error("name", NAME_TAKEN_MESSAGE)

    def _validate_options(self, form: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        schema = self.options_schema
        if schema is None:
            return {}
        values: Dict[str, Any] = {}
        for key, info in schema.model_fields.items():
            form_key = OPTION_PREFIX + key
            input_type, _ = _input_type(info.annotation)
            raw = form.get(form_key)
            if input_type == "checkbox":
                values[key] = self._is_checked(raw)
                continue
            text = str(raw).strip() if raw is not None else ""
            if not text:
                if info.is_required():
                    self._add_error(form_key, BLANK_MESSAGE)
                continue
            values[key] = text
        if any(key.startswith(OPTION_PREFIX) for key in self.errors):
            return None
        try:
            model = schema.model_validate(values)
        except ValidationError as exc:
            for error in exc.errors():
                loc = error.get("loc") or ()
                key = OPTION_PREFIX + str(loc[0]) if loc else None
                if key:
                    self._add_error(key, error.get("msg", "Invalid value."))
                else:
                    self.form_errors.append(error.get("msg", "Invalid value."))
            return None
        return model.model_dump(mode="json")

    @staticmethod
    def _is_checked(raw: Any) -> bool:
        return raw is not None and str(raw).strip().lower() in _TRUTHY


__all__ = ["ConfigFormVM", "FieldView", "FormKind"]
