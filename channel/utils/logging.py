"""Root logging setup for the config UI and its CLI.

``CHANNEL_LOG_LEVEL`` sets the root level, ``CHANNEL_DEBUG`` forces DEBUG when no
explicit level is given, and ``CHANNEL_LOG_LEVELS`` tunes single loggers, e.g.
``uvicorn.access=WARNING,channel_web=DEBUG``.
"""

from __future__ import annotations

import logging
import os
from typing import Dict, Mapping, Optional

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%H:%M:%S"


def _coerce_level(value: Optional[str], fallback: int) -> int:
    text = (value or "").strip()
    if not text:
        return fallback
    if text.isdigit():
        return int(text)
    candidate = logging.getLevelName(text.upper())
    return candidate if isinstance(candidate, int) else fallback


def env_truthy(value: Optional[str], default: bool = False) -> bool:
    """Interpret an environment flag; unset or blank values yield ``default``."""
    if value is None or not value.strip():
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def parse_logger_levels(spec: Optional[str]) -> Dict[str, int]:
    """Parse ``name=LEVEL`` pairs separated by commas; malformed pairs are skipped."""
    levels: Dict[str, int] = {}
    for chunk in (spec or "").split(","):
        name, sep, raw = chunk.partition("=")
        name = name.strip()
        if not sep or not name:
            continue
        level = _coerce_level(raw, -1)
        if level >= 0:
            levels[name] = level
    return levels


def configure_root(
    default_level: int | str = logging.INFO,
    environ: Optional[Mapping[str, str]] = None,
) -> int:
    """Configure the root logger and per-logger overrides; return the root level."""
    env = os.environ if environ is None else environ
    if isinstance(default_level, str):
        effective = _coerce_level(default_level, logging.INFO)
    else:
        effective = int(default_level)

    explicit = env.get("CHANNEL_LOG_LEVEL")
    if explicit and explicit.strip():
        effective = _coerce_level(explicit, effective)
    elif env_truthy(env.get("CHANNEL_DEBUG")):
        effective = logging.DEBUG

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=effective, format=_FORMAT, datefmt=_DATEFMT)
    root.setLevel(effective)

    for name, level in parse_logger_levels(env.get("CHANNEL_LOG_LEVELS")).items():
        logging.getLogger(name).setLevel(level)
    return effective


def level_name(level: int) -> str:
    return logging.getLevelName(level)
