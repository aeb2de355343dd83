"""eksi — a paginating client for eksisozluk.com topics, entries and authors."""

from eksi.client import Author, Eksi, Page
from eksi.errors import (
    EksiError,
    EntryNotFound,
    InvalidDateFormat,
    MalformedPageError,
    MaxRetriesExceeded,
    RegistrationError,
)
from eksi.scraper import Entry, RegistrationOptions, RequestGate, TopicQuery, parse_date

__all__ = [
    "Eksi",
    "Page",
    "Author",
    "Entry",
    "TopicQuery",
    "RegistrationOptions",
    "RequestGate",
    "parse_date",
    "EksiError",
    "MaxRetriesExceeded",
    "MalformedPageError",
    "InvalidDateFormat",
    "EntryNotFound",
    "RegistrationError",
]
