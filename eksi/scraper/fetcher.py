"""HTTP transport and document fetching for a single site origin."""

from __future__ import annotations

import logging
from typing import Any, Mapping

import httpx
from bs4 import BeautifulSoup

from eksi.config import settings
from eksi.scraper.fingerprint import generate_fingerprint
from eksi.scraper.gate import RequestGate, shared_gate

logger = logging.getLogger(__name__)

_AJAX_HEADERS = {"X-Requested-With": "XMLHttpRequest"}

# Statuses that mean "slow down", handled like a dropped connection
_TRANSIENT_STATUSES = frozenset({429, 503})


def parse_html(html: str) -> BeautifulSoup:
    """Parse *html* into a queryable document."""
    return BeautifulSoup(html, "html.parser")


class Transport:
    """Sends requests to one origin through a :class:`RequestGate`.

    The transport owns the client's session state: the cookie jar of its
    ``httpx.Client`` and the fingerprint headers generated at construction.
    """

    def __init__(
        self,
        gate: RequestGate | None = None,
        fingerprint: Mapping[str, str] | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self.gate = gate or shared_gate()
        self.fingerprint = dict(fingerprint) if fingerprint is not None else generate_fingerprint()
        self.base_url = httpx.URL(base_url or settings.base_url)
        self._client = httpx.Client(
            timeout=settings.request_timeout if timeout is None else timeout,
            follow_redirects=True,
        )

    @property
    def cookies(self) -> httpx.Cookies:
        return self._client.cookies

    def resolve(self, target: str | httpx.URL) -> httpx.URL:
        """Resolve a path or absolute URL against the base origin."""
        return self.base_url.join(target)

    def send(
        self,
        target: str | httpx.URL,
        method: str = "GET",
        data: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        """Send a request, retrying transient failures.

        Network errors and 429/503 responses are retried after the gate's
        cooldown until the gate's budget runs out.  Every attempt waits for
        its turn at the gate and rebuilds its headers.

        Raises:
            MaxRetriesExceeded: If the gate's retry budget is exhausted.
            httpx.HTTPStatusError: For any other non-2xx status.
        """
        url = self.resolve(target)
        while True:
            self.gate.wait_turn()
            # Keys compare case-insensitively; the fingerprint is applied last
            request_headers = httpx.Headers(_AJAX_HEADERS)
            request_headers.update(headers or {})
            request_headers.update(self.fingerprint)
            try:
                response = self._client.request(
                    method, url, data=data, headers=request_headers
                )
            except httpx.TransportError as exc:
                self.gate.record_failure(str(url), repr(exc))
                continue

            logger.info(
                "eksi.request",
                extra={
                    "method": method,
                    "url": str(response.url),
                    "status_code": response.status_code,
                },
            )
            if response.status_code in _TRANSIENT_STATUSES:
                self.gate.record_failure(
                    str(url), f"{response.status_code} {response.reason_phrase}"
                )
                continue

            response.raise_for_status()
            self.gate.record_success()
            return response

    def fetch_document(
        self,
        endpoint: str | httpx.URL,
        method: str = "GET",
        data: Mapping[str, Any] | None = None,
    ) -> BeautifulSoup:
        """Fetch *endpoint* and return its parsed HTML."""
        response = self.send(endpoint, method=method, data=data)
        return parse_html(response.text)

    def close(self) -> None:
        self._client.close()
