"""eksi CLI — browse topics, entries and authors from the terminal.

Usage:
    python cli/main.py --help

Commands:
    entries    → pages of a topic
    entry      → a single entry by id
    author     → an author's most recent entries
    favorites  → an author's favorite authors
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from eksi.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import logging
from typing import NoReturn, Optional

import httpx
import typer

from cli.rendering import render_author_list, render_entry, render_page_header
from eksi import Eksi, EksiError, TopicQuery
from eksi.config import settings

app = typer.Typer(
    name="eksi",
    help="Read eksisozluk.com from the command line.",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every request."),
) -> None:
    """Configure logging before any command runs."""
    logging.basicConfig(
        level=logging.INFO if verbose else settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _fail(exc: Exception) -> NoReturn:
    typer.echo(f"Error: {exc}", err=True)
    raise typer.Exit(code=1)


# ---------------------------------------------------------------------------
# Topic commands
# ---------------------------------------------------------------------------
@app.command("entries")
def entries(
    title: str = typer.Argument(..., help="Topic name as it appears in the URL."),
    page: Optional[int] = typer.Option(None, "--page", help="Page to open."),
    focus: Optional[int] = typer.Option(None, "--focus", help="Open the page holding this entry id."),
    pages: int = typer.Option(1, "--pages", min=1, help="Number of pages to walk forward."),
) -> None:
    """Print entries of a topic, optionally walking several pages."""
    query = TopicQuery(page=page, focus_to=focus) if page is not None or focus is not None else None
    with Eksi() as eksi:
        try:
            current = eksi.entries(title, query)
            for walked in range(1, pages + 1):
                typer.echo(render_page_header(current))
                for item in current:
                    typer.echo(render_entry(item))
                if walked == pages:
                    break
                current = current.next()
                if current is None:
                    break
        except (EksiError, httpx.HTTPError) as exc:
            _fail(exc)


@app.command("entry")
def entry(
    entry_id: int = typer.Argument(..., help="Numeric entry id."),
) -> None:
    """Print a single entry."""
    with Eksi() as eksi:
        try:
            item = eksi.entry(entry_id)
        except (EksiError, httpx.HTTPError) as exc:
            _fail(exc)
    typer.echo(render_entry(item))


# ---------------------------------------------------------------------------
# Author commands
# ---------------------------------------------------------------------------
@app.command("author")
def author_entries(
    nick: str = typer.Argument(..., help="Author nickname."),
    page: int = typer.Option(1, "--page", min=1, help="Page of recent entries."),
) -> None:
    """Print an author's most recent entries."""
    with Eksi() as eksi:
        try:
            current = eksi.author(nick).entries(page)
        except (EksiError, httpx.HTTPError) as exc:
            _fail(exc)
    typer.echo(render_page_header(current))
    for item in current:
        typer.echo(render_entry(item))


@app.command("favorites")
def favorites(
    nick: str = typer.Argument(..., help="Author nickname."),
) -> None:
    """List the authors NICK has marked as favorites."""
    with Eksi() as eksi:
        try:
            authors = eksi.author(nick).favorite_authors()
        except (EksiError, httpx.HTTPError) as exc:
            _fail(exc)
    typer.echo(render_author_list(nick, authors))


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
