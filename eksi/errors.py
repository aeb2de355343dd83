"""Exception hierarchy for the eksi client.

Permanent HTTP failures are not wrapped: they surface as
``httpx.HTTPStatusError`` raised by ``Response.raise_for_status()``.
"""

from __future__ import annotations


class EksiError(Exception):
    """Base class for every error raised by this package."""


class MaxRetriesExceeded(EksiError):
    """Too many consecutive transient failures (network, 429, 503)."""

    def __init__(self, attempts: int, url: str) -> None:
        super().__init__(f"Max retries exceeded after {attempts} failures ({url})")
        self.attempts = attempts
        self.url = url


class MalformedPageError(EksiError):
    """A fetched page lacks a node or attribute the extractor relies on."""


class InvalidDateFormat(MalformedPageError, ValueError):
    """An entry date label does not start with ``dd.mm.yyyy``."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Invalid date format: {text!r}")
        self.text = text


class EntryNotFound(MalformedPageError):
    """A single-entry page yielded no entries."""


class RegistrationError(EksiError):
    """The registration form was submitted but the site did not accept it."""
