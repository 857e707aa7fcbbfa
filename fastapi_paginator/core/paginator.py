"""Page arithmetic for paginated API responses."""

from __future__ import annotations

import logging
import operator
from collections.abc import Mapping, Sequence
from typing import Any, Iterator, Protocol, TypeVar

from fastapi_paginator.config import PaginatorConfig
from fastapi_paginator.core.errors import PaginationTypeError, PaginationValueError
from fastapi_paginator.schemas.summary import PaginationSummary
from fastapi_paginator.utils.query_params import parse_page_number

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RequestLike(Protocol):
    """Anything exposing query parameters by name, e.g. a Starlette ``Request``."""

    @property
    def query_params(self) -> Mapping[str, str]: ...


def _as_int(name: str, value: Any) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise PaginationTypeError(
            f"{name} must be an integer, got {type(value).__name__}"
        ) from None


def _count_pages(number_of_items: int, items_per_page: int) -> int:
    return max(1, -(-number_of_items // items_per_page))


class Paginator:
    """Calculate offsets and page numbers for a paginated collection.

    The requested page is normalized into ``[1, number_of_pages]``: zero or a
    negative page becomes the first page, anything past the end becomes the
    last page. The paginator is immutable once built, so every derived value
    is a pure read and instances can be shared between threads.

    Example::

        paginator = Paginator(28, 25, 2)
        items[paginator.offset : paginator.offset + paginator.items_per_page]
    """

    __slots__ = ("_items_per_page", "_number_of_items", "_current_page")

    def __init__(self, number_of_items: int, items_per_page: int, page: int = 0) -> None:
        number_of_items = _as_int("number_of_items", number_of_items)
        items_per_page = _as_int("items_per_page", items_per_page)
        page = _as_int("page", page)

        if items_per_page < 1:
            raise PaginationValueError(
                f"items_per_page must be at least 1, got {items_per_page}"
            )
        if number_of_items < 0:
            raise PaginationValueError(
                f"number_of_items must not be negative, got {number_of_items}"
            )

        current_page = page
        if current_page < 1:
            current_page = 1

        last_page = _count_pages(number_of_items, items_per_page)
        if current_page > last_page:
            current_page = last_page

        if current_page != page:
            logger.debug("Normalized requested page %s to %s", page, current_page)

        self._items_per_page = items_per_page
        self._number_of_items = number_of_items
        self._current_page = current_page

    @classmethod
    def create(cls, number_of_items: int, items_per_page: int, page: int = 0) -> Paginator:
        """Return a paginator for ``page``; ``0`` means no page was requested."""
        return cls(number_of_items, items_per_page, page)

    @classmethod
    def from_request(
        cls,
        number_of_items: int,
        items_per_page: int,
        request: RequestLike,
        config: PaginatorConfig | None = None,
    ) -> Paginator:
        """Build a paginator using the page number found in the request query.

        A missing or malformed page parameter falls back to the first page.
        """
        config = config or PaginatorConfig()
        page = parse_page_number(request.query_params, config.page_param)
        return cls(number_of_items, items_per_page, page)

    @property
    def current_page(self) -> int:
        """Normalized 1-based page number."""
        return self._current_page

    @property
    def number_of_items(self) -> int:
        """Total number of items in the collection."""
        return self._number_of_items

    @property
    def items_per_page(self) -> int:
        """Number of items shown on each page."""
        return self._items_per_page

    @property
    def offset(self) -> int:
        """Zero-based index of the first item on the current page."""
        return (self.current_page - 1) * self.items_per_page

    @property
    def number_of_pages(self) -> int:
        """Pages needed to hold every item; an empty collection still has one."""
        return _count_pages(self.number_of_items, self.items_per_page)

    @property
    def previous_page(self) -> int:
        """Page before the current one, or 1 when already on the first page."""
        if self.current_page <= 1:
            return 1
        return self.current_page - 1

    @property
    def next_page(self) -> int:
        """Page after the current one, or the last page when already there."""
        if self.current_page >= self.number_of_pages:
            return self.number_of_pages
        return self.current_page + 1

    @property
    def show(self) -> bool:
        """True when there is more than one page to navigate."""
        return self.number_of_pages > 1

    def is_current_page(self, page: int) -> bool:
        """Return True if ``page`` is the current page; no range check is made."""
        return page == self.current_page

    def pages(self) -> list[int]:
        """Return every page number, e.g. ``[1, 2, 3, 4, 5]``."""
        return list(range(1, self.number_of_pages + 1))

    def pages_stream(self) -> Iterator[int]:
        """Yield page numbers one at a time without building the full list.

        The stream is one-shot. Calling ``close()`` on it (or wrapping it in
        ``contextlib.closing``) stops it early.
        """
        last_page = self.number_of_pages
        page = 1
        try:
            while page <= last_page:
                yield page
                page += 1
        except GeneratorExit:
            logger.debug("Page stream closed at page %s of %s", page, last_page)
            raise

    def to_summary(self) -> PaginationSummary[Any]:
        """Return a serializable snapshot with an empty ``data`` payload."""
        return PaginationSummary[Any](
            per_page=self.items_per_page,
            total_entries=self.number_of_items,
            page=self.current_page,
            offset=self.offset,
            next_page=self.next_page,
            previous_page=self.previous_page,
            total_pages=self.number_of_pages,
        )

    def to_summary_with_data(self, items: Sequence[T]) -> PaginationSummary[T]:
        """Return a snapshot carrying ``items`` as its ``data`` payload.

        Raises:
            PaginationTypeError: ``items`` is not a sequence, or is a string,
                bytes or a mapping.
        """
        if (
            not isinstance(items, Sequence)
            or isinstance(items, (str, bytes, bytearray))
            or isinstance(items, Mapping)
        ):
            raise PaginationTypeError(
                f"Summary data must be a sequence, got {type(items).__name__}"
            )
        return self.to_summary().model_copy(update={"data": list(items)})

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Paginator):
            return NotImplemented
        return (
            self.items_per_page == other.items_per_page
            and self.number_of_items == other.number_of_items
            and self.current_page == other.current_page
        )

    def __hash__(self) -> int:
        return hash((self.items_per_page, self.number_of_items, self.current_page))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(number_of_items={self.number_of_items}, "
            f"items_per_page={self.items_per_page}, page={self.current_page})"
        )
