"""Record extraction: turns a parsed topic page into :class:`Entry` records.

Extraction is strict.  A page missing any node or attribute the extractor
relies on raises :class:`~eksi.errors.MalformedPageError` and no partial
result is returned.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import List

from bs4 import BeautifulSoup, Tag

from eksi.errors import InvalidDateFormat, MalformedPageError
from eksi.scraper.models import Entry

# dd.mm.yyyy[ hh:mm], anything after (the "~ ..." edit stamp) is ignored
_DATE_RE = re.compile(r"^(\d{2})\.(\d{2})\.(\d{4})(?: (\d{2}):(\d{2}))?")


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _attr(node: Tag, name: str) -> str:
    value = node.get(name)
    if value is None:
        raise MalformedPageError(f"<{node.name}> is missing attribute {name!r}")
    if isinstance(value, list):
        value = " ".join(value)
    return value


def _int_attr(node: Tag, name: str) -> int:
    value = _attr(node, name)
    try:
        return int(value)
    except ValueError:
        raise MalformedPageError(
            f"<{node.name}> attribute {name!r} is not numeric: {value!r}"
        ) from None


def _find(node: Tag, selector: str) -> Tag:
    found = node.select_one(selector)
    if found is None:
        raise MalformedPageError(f"No {selector!r} node inside <{node.name}>")
    return found


def _title_node(entry: Tag) -> Tag:
    """Return the ``#title`` sibling of the entry's parent container.

    The title is rendered once per topic page, next to the entry list, so
    every entry on the page shares it.
    """
    container = entry.parent
    if container is None:
        raise MalformedPageError("Entry node has no parent container")
    previous = container.find_previous_siblings(id="title")
    if previous:
        return previous[-1]
    following = container.find_next_sibling(id="title")
    if following is None:
        raise MalformedPageError("No #title node next to the entry list")
    return following


def _extract_entry(entry: Tag) -> Entry:
    title = _title_node(entry)
    content = _find(entry, ".content")
    return Entry(
        id=_int_attr(entry, "data-id"),
        title=_attr(title, "data-title"),
        title_id=_int_attr(title, "data-id"),
        author=_attr(entry, "data-author"),
        text=content.get_text().strip(),
        html=content.decode_contents().strip(),
        timestamp=parse_date(_find(entry, ".entry-date").get_text()),
        favorite_count=_int_attr(entry, "data-favorite-count"),
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_date(fulldate: str) -> datetime:
    """Parse an entry date label into its creation time.

    The label looks like ``"dd.mm.yyyy hh:mm ~ dd.mm.yyyy hh:mm"`` where the
    part after ``~`` is the last edit time, if the entry was edited.  Only
    the creation date is returned.  A missing time means midnight.

    Raises:
        InvalidDateFormat: If *fulldate* does not start with ``dd.mm.yyyy``.
    """
    match = _DATE_RE.match(fulldate.strip())
    if not match:
        raise InvalidDateFormat(fulldate)

    day, month, year, hour, minute = match.groups()
    try:
        return datetime(
            int(year),
            int(month),
            int(day),
            int(hour or 0),
            int(minute or 0),
        )
    except ValueError:
        raise InvalidDateFormat(fulldate) from None


def extract_entries(document: BeautifulSoup) -> List[Entry]:
    """Return one :class:`Entry` per entry node, in document order."""
    return [_extract_entry(node) for node in document.select('[id="entry-item"]')]


def extract_authors(document: BeautifulSoup) -> List[str]:
    """Return the nicknames listed in the first column of a table page."""
    return [cell.get_text().strip() for cell in document.select("td:nth-child(1)")]
