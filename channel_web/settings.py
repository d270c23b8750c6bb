"""Environment-driven settings for the connector config web UI."""

from __future__ import annotations

import logging
import os
import pathlib
import secrets
from dataclasses import dataclass, field
from typing import Mapping, Optional, Tuple

from channel.utils.logging import env_truthy

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 20


def _parse_int(raw: Optional[str], fallback: int, *, minimum: int = 0) -> int:
    if raw is None or not raw.strip():
        return fallback
    try:
        value = int(raw.strip())
    except ValueError:
        logger.warning("Ignoring invalid integer setting %r", raw)
        return fallback
    return value if value >= minimum else fallback


def _parse_csv(raw: Optional[str]) -> Tuple[str, ...]:
    if not raw:
        return ()
    return tuple(item.strip() for item in raw.split(",") if item.strip())


@dataclass
class Settings:
    """Runtime settings; ``page_size == 0`` leaves the paginator unconfigured."""

    config_path: Optional[pathlib.Path] = None
    page_size: int = DEFAULT_PAGE_SIZE
    secret_key: str = field(default_factory=lambda: secrets.token_hex(32))
    csrf_enabled: bool = True
    flash_enabled: bool = True
    cors_origins: Tuple[str, ...] = ()
    title: str = "Channel connectors"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        path = (env.get("CHANNEL_CONFIG_PATH") or "").strip()
        secret = (env.get("CHANNEL_SECRET_KEY") or "").strip()
        if not secret:
            logger.warning("CHANNEL_SECRET_KEY not set; sessions will not survive a restart")
            secret = secrets.token_hex(32)
        return cls(
            config_path=pathlib.Path(path) if path else None,
            page_size=_parse_int(env.get("CHANNEL_PAGE_SIZE"), DEFAULT_PAGE_SIZE),
            secret_key=secret,
            csrf_enabled=env_truthy(env.get("CHANNEL_CSRF"), default=True),
            flash_enabled=env_truthy(env.get("CHANNEL_FLASH"), default=True),
            cors_origins=_parse_csv(env.get("CORS_ALLOW_ORIGINS")),
        )


__all__ = ["DEFAULT_PAGE_SIZE", "Settings"]
