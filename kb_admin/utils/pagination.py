"""Page slicing for record tables."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Generic, Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of a record list (``page`` is 1-based)."""
    items: list[T] = field(default_factory=list)
    page: int = 1
    total_pages: int = 1
    total_items: int = 0

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1


def total_pages(count: int, rows_per_page: int) -> int:
    """Number of pages needed for ``count`` rows; an empty table has one page."""
    if rows_per_page < 1:
        raise ValueError("rows_per_page must be at least 1")
    return max(1, math.ceil(count / rows_per_page))


def paginate(items: Sequence[T], page: int, rows_per_page: int) -> Page[T]:
    """Slice ``items`` for ``page``, clamping the page number into range."""
    pages = total_pages(len(items), rows_per_page)
    page = min(max(page, 1), pages)
    start = (page - 1) * rows_per_page
    return Page(
        items=list(items[start:start + rows_per_page]),
        page=page,
        total_pages=pages,
        total_items=len(items),
    )
