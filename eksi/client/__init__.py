"""Client package — the site client, page snapshots and author handles."""

from eksi.client.author import Author
from eksi.client.eksi import Eksi
from eksi.client.page import Page

__all__ = ["Eksi", "Page", "Author"]
