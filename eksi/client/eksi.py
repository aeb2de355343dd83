"""The site client: topics, single entries, authors and registration."""

from __future__ import annotations

import logging
from typing import Callable, Mapping

import httpx
from bs4 import BeautifulSoup

from eksi.client.author import Author
from eksi.client.page import Page
from eksi.errors import EntryNotFound, MalformedPageError, RegistrationError
from eksi.scraper.extractor import extract_entries
from eksi.scraper.fetcher import Transport, parse_html
from eksi.scraper.gate import RequestGate
from eksi.scraper.models import Entry, RegistrationOptions, TopicQuery

logger = logging.getLogger(__name__)

# Literal the registration response contains when the account was created
_REGISTERED_MARKER = "kaydoldunuz"


class Eksi:
    """Client for one browsing session.

    Each client keeps its own cookie jar and fingerprint headers.  Request
    pacing and the retry budget come from *gate*, which defaults to the
    process-wide gate shared by every client.
    """

    def __init__(
        self,
        gate: RequestGate | None = None,
        fingerprint: Mapping[str, str] | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self.transport = Transport(
            gate=gate, fingerprint=fingerprint, base_url=base_url, timeout=timeout
        )

    def __enter__(self) -> Eksi:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self.transport.close()

    # ------------------------------------------------------------------
    # Fetching
    # ------------------------------------------------------------------
    def resolve(self, endpoint: str | httpx.URL) -> httpx.URL:
        return self.transport.resolve(endpoint)

    def fetch_document(self, endpoint: str | httpx.URL) -> BeautifulSoup:
        return self.transport.fetch_document(endpoint)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def entries(self, title: str, query: TopicQuery | None = None) -> Page[Entry]:
        """Return a page of entries from the topic *title*.

        The first page is always fetched so that the site redirects to the
        canonical topic URL; paged queries only work against that URL.  When
        *query* is given the canonical URL is fetched a second time with the
        query applied.
        """
        response = self.transport.send(self.resolve(title).copy_set_param("p", "1"))
        url = response.url
        if query is None:
            return Page(self, parse_html(response.text), extract_entries, url)

        url = url.copy_merge_params(query.params())
        document = self.fetch_document(url)
        # The focus applies to this fetch only; navigation moves "p" alone
        return Page(self, document, extract_entries, url.copy_remove_param("focusto"))

    def entry(self, entry_id: int) -> Entry:
        """Return the entry with id *entry_id*.

        Raises:
            EntryNotFound: If the page holds no entries.
        """
        entries = extract_entries(self.fetch_document(f"entry/{entry_id}"))
        if not entries:
            raise EntryNotFound(f"No entry found for id {entry_id}")
        return entries[0]

    def author(self, nick: str) -> Author:
        return Author(self, nick)

    def register(
        self,
        options: RegistrationOptions,
        email_callback: Callable[[], str],
    ) -> None:
        """Register a new account.

        Args:
            options: Nickname, email and password of the new account.
            email_callback: Called once the form is accepted; must return the
                verification token sent to ``options.email``.

        Raises:
            MalformedPageError: If the form carries no anti-forgery token.
            RegistrationError: If the site does not confirm the registration.
        """
        form = self.fetch_document("kayit")
        token_input = form.select_one("[name=__RequestVerificationToken]")
        if token_input is None or token_input.get("value") is None:
            raise MalformedPageError("Registration form has no verification token")

        response = self.transport.send(
            "kayit",
            method="POST",
            data={
                "__RequestVerificationToken": token_input["value"],
                "Nick": options.nick,
                "Email": options.email,
                "Password": options.password,
                "PasswordConfirm": options.password,
                "EulaConfirmed": "true",
            },
        )
        if _REGISTERED_MARKER not in response.text:
            raise RegistrationError(f"Registration failed for {options.nick!r}")

        logger.info(
            "eksi.register.success",
            extra={"nick": options.nick, "email": options.email},
        )
        email_token = email_callback()
        self.transport.send(f"kayit/onay/{email_token}")
