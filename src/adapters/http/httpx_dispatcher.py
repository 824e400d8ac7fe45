"""
httpx dispatcher adapter - Implements RequestDispatcher protocol.

This module provides the httpx implementation of the domain's dispatch
port. It turns every outcome of an HTTP call into either a parsed JSON
payload or a normalized OperationError:

- No response (DNS, connect, read/write, timeout) -> TRANSPORT
- Non-2xx response -> SERVER_REJECTED, message from the "detail" field
  when present, otherwise "HTTP error <status>"
- Body that is empty, not valid JSON, or cannot be decoded -> UNKNOWN

Request headers and bodies are never logged: they carry api keys,
passwords and activation tokens.
"""

import json
import logging
from typing import Any
from urllib.parse import urlsplit

import httpx

from src.config.settings import Settings, get_settings
from src.domain.models import (
    DispatchFailure,
    DispatchResult,
    DispatchSuccess,
    OperationError,
    RequestSpec,
)
from src.domain.ports import ErrorKind

logger = logging.getLogger(__name__)


def build_async_client(settings: Settings | None = None) -> httpx.AsyncClient:
    """
    Create the shared httpx.AsyncClient.

    The timeout bounds connect, read, write and pool acquisition so an
    in-flight dispatch always terminates.
    """
    settings = settings or get_settings()
    return httpx.AsyncClient(timeout=httpx.Timeout(settings.request_timeout_seconds))


def extract_detail(body: Any) -> str | None:
    """
    Pull a user-facing message out of an error body.

    Accepts both {"detail": "..."} and FastAPI validation errors
    ({"detail": [{"msg": "..."}, ...]}).
    """
    if not isinstance(body, dict):
        return None
    detail = body.get("detail")
    if isinstance(detail, str) and detail:
        return detail
    if isinstance(detail, list) and detail:
        first = detail[0]
        if isinstance(first, dict) and isinstance(first.get("msg"), str):
            return first["msg"]
    return None


class HttpxRequestDispatcher:
    """
    Implements RequestDispatcher protocol via httpx.

    Uses structural subtyping - no explicit inheritance from Protocol.
    The client is owned by the caller (created in the app lifespan).
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        """
        Initialize dispatcher with a shared client.

        Args:
            client: httpx.AsyncClient carrying timeout configuration
        """
        self._client = client

    async def dispatch(self, spec: RequestSpec) -> DispatchResult:
        """
        Issue the request described by spec.

        Args:
            spec: Validated outbound request

        Returns:
            DispatchSuccess or DispatchFailure, never raises for network
            or protocol failures
        """
        target = _log_target(spec.url)
        logger.debug("Dispatching %s %s", spec.method.value, target)

        try:
            response = await self._client.request(
                spec.method.value,
                spec.url,
                headers=spec.headers,
                json=spec.body,
            )
        except httpx.TimeoutException:
            logger.warning("Request to %s timed out", target)
            return DispatchFailure(
                OperationError(kind=ErrorKind.TRANSPORT, message="Request timed out")
            )
        except httpx.TransportError as exc:
            logger.warning("Request to %s failed: %s", target, type(exc).__name__)
            return DispatchFailure(
                OperationError(
                    kind=ErrorKind.TRANSPORT,
                    message="Could not reach server",
                )
            )
        except httpx.DecodingError:
            # A response arrived but its content-encoding was corrupt
            logger.warning("Response body from %s could not be decoded", target)
            return DispatchFailure(
                OperationError(
                    kind=ErrorKind.UNKNOWN,
                    message="Could not decode server response",
                )
            )

        logger.info("%s %s -> %s", spec.method.value, target, response.status_code)

        if not response.is_success:
            return DispatchFailure(self._rejected(response))

        try:
            return DispatchSuccess(payload=response.json())
        except (json.JSONDecodeError, UnicodeDecodeError):
            return DispatchFailure(self._unparseable(response))

    def _rejected(self, response: httpx.Response) -> OperationError:
        try:
            body = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            return self._unparseable(response)
        detail = extract_detail(body)
        return OperationError(
            kind=ErrorKind.SERVER_REJECTED,
            message=detail or f"HTTP error {response.status_code}",
            http_status=response.status_code,
            from_server=detail is not None,
        )

    def _unparseable(self, response: httpx.Response) -> OperationError:
        logger.warning("Response body from %s is not valid JSON", _log_target(str(response.url)))
        return OperationError(
            kind=ErrorKind.UNKNOWN,
            message=f"Could not parse server response (HTTP {response.status_code})",
            http_status=response.status_code,
        )


def _log_target(url: str) -> str:
    """URL without its query string."""
    parts = urlsplit(url)
    return f"{parts.scheme}://{parts.netloc}{parts.path}"
