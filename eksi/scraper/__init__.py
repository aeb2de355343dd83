"""Scraper package — transport, fetch & entry extraction."""

from eksi.scraper.extractor import extract_authors, extract_entries, parse_date
from eksi.scraper.fetcher import Transport, parse_html
from eksi.scraper.fingerprint import generate_fingerprint
from eksi.scraper.gate import RequestGate, shared_gate
from eksi.scraper.models import Entry, RegistrationOptions, TopicQuery

__all__ = [
    "Transport",
    "parse_html",
    "RequestGate",
    "shared_gate",
    "generate_fingerprint",
    "extract_entries",
    "extract_authors",
    "parse_date",
    "Entry",
    "TopicQuery",
    "RegistrationOptions",
]
