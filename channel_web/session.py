"""Session-backed flash messages and CSRF tokens.

Both rely on Starlette's ``SessionMiddleware`` being installed on the app.
"""

from __future__ import annotations

import secrets
from dataclasses import dataclass
from typing import List

from fastapi import Request

FLASH_KEY = "_flashes"
CSRF_KEY = "_csrf_token"


@dataclass(frozen=True)
class FlashMessage:
    category: str
    message: str


class FlashMessages:
    """Queue one-shot notifications that the next rendered page displays."""

    def add(self, request: Request, category: str, message: str) -> None:
        queue = list(request.session.get(FLASH_KEY, []))
        queue.append([category, message])
        request.session[FLASH_KEY] = queue

    def success(self, request: Request, message: str) -> None:
        self.add(request, "success", message)

    def pop_all(self, request: Request) -> List[FlashMessage]:
        queue = request.session.pop(FLASH_KEY, [])
        return [FlashMessage(category=item[0], message=item[1]) for item in queue]


def csrf_token(request: Request) -> str:
    """Return the session CSRF token, creating it on first use."""
    token = request.session.get(CSRF_KEY)
    if not token:
        token = secrets.token_urlsafe(32)
        request.session[CSRF_KEY] = token
    return token


__all__ = ["FlashMessage", "FlashMessages", "csrf_token"]
