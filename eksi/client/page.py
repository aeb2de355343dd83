"""Immutable page snapshots with forward/backward navigation."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Callable, Generic, Iterator, List, TypeVar

import httpx
from bs4 import BeautifulSoup

if TYPE_CHECKING:
    from eksi.client.eksi import Eksi

T = TypeVar("T")


def _pager_int(document: BeautifulSoup, attribute: str) -> int:
    """Read a numeric pager attribute, defaulting to 1."""
    pager = document.select_one(".pager")
    if pager is None:
        return 1
    try:
        return int(pager.get(attribute, ""))
    except (TypeError, ValueError):
        return 1


class Page(Sequence, Generic[T]):
    """One page of records plus its position in a multi-page listing.

    A page never changes after construction.  :meth:`next` and :meth:`prev`
    fetch the adjacent page and return a new :class:`Page`; they return
    ``None`` without touching the network at either end of the listing.
    """

    def __init__(
        self,
        client: Eksi,
        document: BeautifulSoup,
        transform: Callable[[BeautifulSoup], List[T]],
        url: str | httpx.URL,
    ) -> None:
        self._client = client
        self._transform = transform
        self._items = tuple(transform(document))
        self.url = httpx.URL(url)
        self.page_count = max(1, _pager_int(document, "data-pagecount"))
        self.current_page = min(max(1, _pager_int(document, "data-currentpage")), self.page_count)

    # ------------------------------------------------------------------
    # Sequence protocol
    # ------------------------------------------------------------------
    def __getitem__(self, index):
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return (
            f"Page(url={str(self.url)!r}, current_page={self.current_page}, "
            f"page_count={self.page_count}, items={len(self._items)})"
        )

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    @property
    def has_next(self) -> bool:
        return self.current_page < self.page_count

    @property
    def has_prev(self) -> bool:
        return self.current_page > 1

    def next(self) -> Page[T] | None:
        """Fetch the following page, or return ``None`` on the last page."""
        if not self.has_next:
            return None
        return self._goto(self.current_page + 1)

    def prev(self) -> Page[T] | None:
        """Fetch the preceding page, or return ``None`` on the first page."""
        if not self.has_prev:
            return None
        return self._goto(self.current_page - 1)

    def _goto(self, page: int) -> Page[T]:
        url = self.url.copy_set_param("p", str(page))
        document = self._client.fetch_document(url)
        return Page(self._client, document, self._transform, url)
