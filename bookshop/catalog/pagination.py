"""Client-side pagination for the shop catalogue.

The whole catalogue is fetched once; pages are slices of that list. Every
derived value (slice bounds, total pages) is computed from the list length
and the current ``PageState`` only, so the helpers below hold no state of
their own. ``Paginator`` bundles them with the page state of one view.
"""

from __future__ import annotations

import math
from typing import Generic, List, Sequence, TypeVar

from ..models import PageState

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 12


def total_pages(list_length: int, page_size: int) -> int:
    """Number of pages needed for ``list_length`` items (0 for an empty list)."""
    if page_size <= 0:
        raise ValueError("page_size must be > 0")
    if list_length < 0:
        raise ValueError("list_length must be >= 0")
    return math.ceil(list_length / page_size)


def page_slice(items: Sequence[T], page: int, page_size: int) -> List[T]:
    """Return the items shown on the 1-indexed ``page``.

    Pages past the end yield an empty list rather than an error.
    """
    if page < 1:
        raise ValueError("page must be >= 1")
    if page_size <= 0:
        raise ValueError("page_size must be > 0")
    start = (page - 1) * page_size
    end = start + page_size
    return list(items[start:end])


def change_page(requested: int, current: int, total: int) -> int:
    """Return the page to show after a page-change request.

    Requests outside ``[1, total]`` are ignored and ``current`` is returned.
    """
    if requested < 1 or requested > total:
        return current
    return requested


def should_paginate(total: int) -> bool:
    return total > 1


class Paginator(Generic[T]):
    """Page state of one catalogue view over an immutable item list."""

    def __init__(self, items: Sequence[T], page_size: int = DEFAULT_PAGE_SIZE):
        self._items: Sequence[T] = tuple(items)
        self.state = PageState(current_page=1, page_size=page_size)

    @property
    def items(self) -> Sequence[T]:
        return self._items

    @property
    def page_size(self) -> int:
        return self.state.page_size

    @property
    def current_page(self) -> int:
        return self.state.current_page

    @property
    def total_pages(self) -> int:
        return total_pages(len(self._items), self.page_size)

    @property
    def current_items(self) -> List[T]:
        return page_slice(self._items, self.current_page, self.page_size)

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def show_controls(self) -> bool:
        return should_paginate(self.total_pages)

    @property
    def page_numbers(self) -> List[int]:
        return list(range(1, self.total_pages + 1))

    def go_to(self, page: int) -> bool:
        """Move to ``page``. Returns ``True`` when the request was accepted."""
        total = self.total_pages
        accepted = change_page(page, self.current_page, total)
        # an empty catalogue still sits on page 1 but has no pages to accept
        if total == 0 or accepted != page:
            return False
        self.state = PageState(current_page=accepted, page_size=self.page_size)
        return True

    def next(self) -> bool:
        return self.go_to(self.current_page + 1)

    def previous(self) -> bool:
        return self.go_to(self.current_page - 1)
