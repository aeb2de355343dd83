"""Lazy author handles."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from eksi.client.page import Page
from eksi.scraper.extractor import extract_authors, extract_entries
from eksi.scraper.models import Entry

if TYPE_CHECKING:
    from eksi.client.eksi import Eksi


class Author:
    """A nickname bound to the client used to fetch its pages.

    Nothing is fetched until :meth:`entries` or :meth:`favorite_authors` is
    called.
    """

    def __init__(self, client: Eksi, nick: str) -> None:
        self._client = client
        self.nick = nick

    def __repr__(self) -> str:
        return f"Author(nick={self.nick!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Author):
            return NotImplemented
        return self.nick == other.nick

    def __hash__(self) -> int:
        return hash(self.nick)

    def entries(self, page: int = 1) -> Page[Entry]:
        """Return one page of the author's most recent entries."""
        url = self._client.resolve("son-entryleri").copy_merge_params(
            {"nick": self.nick, "p": str(page)}
        )
        document = self._client.fetch_document(url)
        return Page(self._client, document, extract_entries, url)

    def favorite_authors(self) -> List[Author]:
        """Return the authors this author has marked as favorites."""
        url = self._client.resolve("favori-yazarlari").copy_merge_params({"nick": self.nick})
        document = self._client.fetch_document(url)
        return [Author(self._client, nick) for nick in extract_authors(document)]
