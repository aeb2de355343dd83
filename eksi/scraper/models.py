"""Data models for the scraper pipeline."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


@dataclass(frozen=True)
class Entry:
    """A single post inside a topic, as rendered on a topic or author page."""

    id: int
    title: str
    title_id: int
    author: str
    text: str
    html: str
    timestamp: datetime
    favorite_count: int


@dataclass(frozen=True)
class TopicQuery:
    """Extra parameters honored on the second round trip of ``Eksi.entries``."""

    page: int | None = None
    # Id of the entry to focus
    focus_to: int | None = None

    def params(self) -> dict[str, str]:
        """Return the query-string parameters this query sets."""
        params: dict[str, str] = {}
        if self.page is not None:
            params["p"] = str(self.page)
        if self.focus_to is not None:
            params["focusto"] = str(self.focus_to)
        return params


@dataclass(frozen=True)
class RegistrationOptions:
    nick: str
    email: str
    password: str

    def __post_init__(self) -> None:
        if not _EMAIL_RE.match(self.email):
            raise ValueError(f"Not an email address: {self.email!r}")
