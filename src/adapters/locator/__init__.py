"""Locator adapters - Sources for page-level query parameters."""

from .url import UrlLocator

__all__ = ["UrlLocator"]
