"""Uvicorn entrypoint for the channel connector config UI."""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

import uvicorn

from channel.utils.logging import configure_root, level_name

from .app import create_app
from .settings import Settings

logger = logging.getLogger(__name__)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse CLI args for web server startup."""
    parser = argparse.ArgumentParser(description="Run the channel connector config UI.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--log-level", default="INFO")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """CLI entrypoint: configure logging, build the app from env, serve it."""
    args = _parse_args(argv)
    level = configure_root(args.log_level)
    logger.info("Log level %s", level_name(level))
    app = create_app(Settings.from_env())
    uvicorn.run(app, host=args.host, port=args.port, log_level=level)


if __name__ == "__main__":
    main()
