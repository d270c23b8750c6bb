"""Paginator service for list views."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, List, Optional, Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of items plus the numbers templates need for navigation."""

    items: List[T]
    page: int
    per_page: int
    total: int

    @property
    def pages(self) -> int:
        return max(1, math.ceil(self.total / self.per_page))

    @property
    def has_prev(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.pages

    @property
    def prev_page(self) -> Optional[int]:
        return self.page - 1 if self.has_prev else None

    @property
    def next_page(self) -> Optional[int]:
        return self.page + 1 if self.has_next else None

    def __iter__(self):
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


class Paginator:
    def __init__(self, per_page: int = 20) -> None:
        if per_page < 1:
            raise ValueError("per_page must be at least 1")
        self.per_page = per_page

    def paginate(self, items: Sequence[T], page: int = 1) -> Page[T]:
        """Slice ``items`` for ``page``; pages below 1 are clamped to 1."""
        page = max(1, int(page))
        start = (page - 1) * self.per_page
        return Page(
            items=list(items[start:start + self.per_page]),
            page=page,
            per_page=self.per_page,
            total=len(items),
        )


__all__ = ["Page", "Paginator"]
