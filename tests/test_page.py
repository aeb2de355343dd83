"""Tests for eksi.client.page — page position, immutability and navigation.

Boundary tests use a ``MagicMock`` client so that any network access would
show up as a call on ``fetch_document``.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import httpx
import pytest
import respx

from eksi.client.page import Page
from eksi.scraper.extractor import extract_entries
from eksi.scraper.fetcher import parse_html

from tests.pages import entry_html, topic_html

_URL = "https://eksisozluk.com/deno--6871?p=2"


def _page(client, current_page, page_count, ids=(1, 2)) -> Page:
    html = topic_html([entry_html(i) for i in ids], current_page=current_page, page_count=page_count)
    return Page(client, parse_html(html), extract_entries, _URL)


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

class TestConstruction:
    def test_reads_pager_and_entries(self) -> None:
        page = _page(MagicMock(), 2, 5, ids=(7, 8, 9))
        assert (page.current_page, page.page_count) == (2, 5)
        assert [e.id for e in page] == [7, 8, 9]
        assert len(page) == 3
        assert page[0].id == 7
        assert [e.id for e in page[1:]] == [8, 9]
        assert page.url == httpx.URL(_URL)

    def test_missing_pager_defaults_to_single_page(self) -> None:
        page = _page(MagicMock(), None, None)
        assert (page.current_page, page.page_count) == (1, 1)

    def test_non_numeric_pager_defaults_to_one(self) -> None:
        html = topic_html([entry_html(1)], current_page=1, page_count=1).replace(
            '<div class="pager" data-pagecount="1" data-currentpage="1">',
            '<div class="pager" data-pagecount="many" data-currentpage="">',
        )
        page = Page(MagicMock(), parse_html(html), extract_entries, _URL)
        assert (page.current_page, page.page_count) == (1, 1)

    @pytest.mark.parametrize(
        "current, count, expected",
        [(9, 3, (3, 3)), (0, 3, (1, 3)), (2, 0, (1, 1)), (-4, -1, (1, 1))],
    )
    def test_position_is_kept_in_range(self, current, count, expected) -> None:
        page = _page(MagicMock(), current, count)
        assert (page.current_page, page.page_count) == expected
        assert 1 <= page.current_page <= page.page_count

    def test_page_is_not_mutable(self) -> None:
        page = _page(MagicMock(), 1, 1)
        with pytest.raises(TypeError):
            page[0] = None  # type: ignore[index]


# ---------------------------------------------------------------------------
# Boundaries
# ---------------------------------------------------------------------------

class TestBoundaries:
    def test_next_on_last_page_returns_none_without_fetching(self) -> None:
        client = MagicMock()
        page = _page(client, 3, 3)
        assert page.has_next is False
        assert page.next() is None
        client.fetch_document.assert_not_called()

    def test_prev_on_first_page_returns_none_without_fetching(self) -> None:
        client = MagicMock()
        page = _page(client, 1, 3)
        assert page.has_prev is False
        assert page.prev() is None
        client.fetch_document.assert_not_called()

    def test_single_page_cannot_move(self) -> None:
        client = MagicMock()
        page = _page(client, 1, 1)
        assert page.next() is None
        assert page.prev() is None
        client.fetch_document.assert_not_called()


# ---------------------------------------------------------------------------
# Navigation
# ---------------------------------------------------------------------------

class TestNavigation:
    def test_next_fetches_following_page(self) -> None:
        client = MagicMock()
        client.fetch_document.return_value = parse_html(
            topic_html([entry_html(30)], current_page=3, page_count=5)
        )
        page = _page(client, 2, 5)

        following = page.next()

        client.fetch_document.assert_called_once_with(
            httpx.URL("https://eksisozluk.com/deno--6871?p=3")
        )
        assert following is not page
        assert (following.current_page, following.page_count) == (3, 5)
        assert [e.id for e in following] == [30]
        assert following.url.params["p"] == "3"

    def test_prev_fetches_preceding_page(self) -> None:
        client = MagicMock()
        client.fetch_document.return_value = parse_html(
            topic_html([entry_html(1)], current_page=1, page_count=5)
        )
        page = _page(client, 2, 5)

        preceding = page.prev()

        client.fetch_document.assert_called_once_with(
            httpx.URL("https://eksisozluk.com/deno--6871?p=1")
        )
        assert preceding.current_page == 1

    def test_navigation_leaves_original_untouched(self) -> None:
        client = MagicMock()
        client.fetch_document.return_value = parse_html(
            topic_html([entry_html(30)], current_page=3, page_count=5)
        )
        page = _page(client, 2, 5, ids=(10, 11))

        page.next()

        assert page.current_page == 2
        assert page.url == httpx.URL(_URL)
        assert [e.id for e in page] == [10, 11]

    def test_next_then_prev_round_trip(self, eksi) -> None:
        def _respond(request: httpx.Request) -> httpx.Response:
            p = int(request.url.params["p"])
            return httpx.Response(
                200, text=topic_html([entry_html(p * 10)], current_page=p, page_count=4)
            )

        start = Page(
            eksi,
            parse_html(topic_html([entry_html(20)], current_page=2, page_count=4)),
            extract_entries,
            _URL,
        )
        with respx.mock:
            route = respx.get("https://eksisozluk.com/deno--6871").mock(side_effect=_respond)
            back = start.next().prev()

        assert back.current_page == start.current_page
        assert [e.id for e in back] == [20]
        assert [call.request.url.params["p"] for call in route.calls] == ["3", "2"]
