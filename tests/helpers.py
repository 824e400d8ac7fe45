"""
Test doubles shared across unit, integration and adversarial tests.
"""

import asyncio
from collections.abc import Callable

import httpx

from src.domain.models import (
    DispatchFailure,
    DispatchResult,
    DispatchSuccess,
    OperationError,
    RequestSpec,
)
from src.domain.ports import ErrorKind

SCENARIO_URL = "https://www.google.com/search?q=flowers&udm=2"
PROXY_BASE = "https://proxy.test/v2/proxy"
API_BASE = "https://api.test"


class FakeDispatcher:
    """
    Implements RequestDispatcher protocol for tests.

    Records every spec it receives and returns queued outcomes in order.
    When gate is set, dispatch blocks until the event fires so tests can
    observe the IN_FLIGHT state.
    """

    def __init__(self, *outcomes: DispatchResult) -> None:
        self.outcomes = list(outcomes)
        self.calls: list[RequestSpec] = []
        self.gate: asyncio.Event | None = None

    async def dispatch(self, spec: RequestSpec) -> DispatchResult:
        self.calls.append(spec)
        if self.gate is not None:
            await self.gate.wait()
        if len(self.outcomes) > 1:
            return self.outcomes.pop(0)
        return self.outcomes[0]


class StaticLocator:
    """Implements Locator protocol over a fixed parameter mapping."""

    def __init__(self, **params: str) -> None:
        self.params = params

    def query_param(self, name: str) -> str | None:
        return self.params.get(name)


def ok(payload: object) -> DispatchSuccess:
    return DispatchSuccess(payload=payload)


def rejected(status: int, message: str) -> DispatchFailure:
    return DispatchFailure(
        OperationError(
            kind=ErrorKind.SERVER_REJECTED,
            message=message,
            http_status=status,
            from_server=True,
        )
    )


def mock_client(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
    """Create an AsyncClient whose requests are answered by handler."""
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


