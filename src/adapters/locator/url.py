"""
URL locator adapter - Implements Locator protocol.

Reads query parameters from the URL the hosting page was loaded with.
"""

from urllib.parse import parse_qs, urlsplit


class UrlLocator:
    """
    Implements Locator protocol over a fixed URL.

    Uses structural subtyping - no explicit inheritance from Protocol.
    The URL is parsed once at construction; the locator is read-only.
    """

    def __init__(self, url: str) -> None:
        """
        Args:
            url: Full incoming URL, e.g. https://host/activate?token=abc
        """
        self._params = parse_qs(urlsplit(url).query, keep_blank_values=True)

    def query_param(self, name: str) -> str | None:
        """Return the first value of name, or None when absent."""
        values = self._params.get(name)
        if not values:
            return None
        return values[0]
