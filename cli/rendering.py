"""Utilities for rendering entries and pages in the CLI."""

from __future__ import annotations

import textwrap
from typing import List

from eksi import Author, Entry, Page

_WIDTH = 78


def render_page_header(page: Page) -> str:
    """Render the position line printed above a page of entries."""
    return f"── {page.url}  [{page.current_page}/{page.page_count}] ──"


def render_entry(entry: Entry) -> str:
    """Render an entry as wrapped body text followed by a signature line.

    Args:
        entry: The entry to render.

    Returns:
        A multi-line string ending with a blank line.
    """
    body = "\n".join(
        textwrap.fill(paragraph, width=_WIDTH) if paragraph else ""
        for paragraph in entry.text.splitlines()
    )
    stamp = entry.timestamp.strftime("%d.%m.%Y %H:%M")
    signature = f"#{entry.id}  {entry.author}  {stamp}  ♥ {entry.favorite_count}"
    return f"{body}\n{signature.rjust(_WIDTH)}\n"


def render_author_list(nick: str, authors: List[Author]) -> str:
    if not authors:
        return f"{nick} has no favorite authors."
    lines = [f"{nick} favorites {len(authors)} author(s):"]
    lines.extend(f"  {a.nick}" for a in authors)
    return "\n".join(lines)
