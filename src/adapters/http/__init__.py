"""HTTP adapters - Dispatcher implementations."""

from .httpx_dispatcher import HttpxRequestDispatcher, build_async_client

__all__ = ["HttpxRequestDispatcher", "build_async_client"]
