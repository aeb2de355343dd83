"""Browser-like header sets attached to every outbound request."""

from __future__ import annotations

from fake_useragent import UserAgent

_CHROMIUM_ACCEPT = (
    "text/html,application/xhtml+xml,application/xml;q=0.9,"
    "image/avif,image/webp,image/apng,*/*;q=0.8"
)
_FIREFOX_ACCEPT = (
    "text/html,application/xhtml+xml,application/xml;q=0.9,"
    "image/avif,image/webp,*/*;q=0.8"
)


def generate_fingerprint(user_agent: str | None = None) -> dict[str, str]:
    """Return a header set that looks like it came from a desktop browser.

    A random user agent is drawn from ``fake_useragent`` unless one is given.
    The remaining headers are chosen to match the browser family of the user
    agent.
    """
    ua = user_agent or UserAgent().random
    headers = {
        "User-Agent": ua,
        "Accept": _FIREFOX_ACCEPT if "Firefox/" in ua else _CHROMIUM_ACCEPT,
        "Accept-Language": "tr-TR,tr;q=0.9,en-US;q=0.8,en;q=0.7",
        "Accept-Encoding": "gzip, deflate",
        "Upgrade-Insecure-Requests": "1",
        "Sec-Fetch-Dest": "document",
        "Sec-Fetch-Mode": "navigate",
        "Sec-Fetch-Site": "none",
        "Sec-Fetch-User": "?1",
    }
    return headers
