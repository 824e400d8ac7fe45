"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure, plus the closed enumerations shared by both
controllers. Adapters implement these protocols.
"""

from enum import Enum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import DispatchResult, RequestSpec


class LifecycleState(str, Enum):
    """
    Lifecycle of a single controller.

    State Transitions:
    - IDLE -> IN_FLIGHT (dispatch started)
    - IN_FLIGHT -> SUCCEEDED (dispatcher returned a payload)
    - IN_FLIGHT -> FAILED (dispatcher returned an error)
    - any non-IN_FLIGHT -> IN_FLIGHT (next human-triggered attempt)

    A validation failure never leaves IDLE. Re-entry while IN_FLIGHT
    is rejected, not queued.
    """

    IDLE = "idle"
    IN_FLIGHT = "in_flight"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class ErrorKind(str, Enum):
    """
    Normalized error taxonomy.

    - VALIDATION: caller input violates a precondition, never reaches the network
    - TRANSPORT: request could not complete (DNS, connection, timeout)
    - SERVER_REJECTED: response received with a non-2xx status
    - UNKNOWN: response received but could not be interpreted
    """

    VALIDATION = "validation"
    TRANSPORT = "transport"
    SERVER_REJECTED = "server_rejected"
    UNKNOWN = "unknown"


class HttpMethod(str, Enum):
    """HTTP methods the dispatcher accepts."""

    GET = "GET"
    POST = "POST"


class Region(str, Enum):
    """
    Proxy points of presence.

    Closed set: the proxy service only routes through these codes.
    """

    US_EAST = "us-east"
    US_WEST = "us-west"
    US_CENTRAL = "us-central"
    NORTHAMERICA_NORTHEAST = "northamerica-northeast"
    SOUTHAMERICA = "southamerica"
    ASIA = "asia"
    AUSTRALIA = "australia"
    EUROPE = "europe"
    MIDDLE_EAST = "middle-east"

    @classmethod
    def codes(cls) -> list[str]:
        """Region codes in display order."""
        return [region.value for region in cls]


class RequestDispatcher(Protocol):
    """Port interface for issuing one HTTP request."""

    async def dispatch(self, spec: "RequestSpec") -> "DispatchResult":
        """
        Perform the call described by spec.

        Performs no business validation and no retries. Never raises
        for network or protocol failures.

        Args:
            spec: Well-formed outbound request

        Returns:
            DispatchSuccess with the parsed JSON body, or DispatchFailure
            carrying a normalized OperationError
        """
        ...


class Locator(Protocol):
    """Port interface for the hosting page's incoming URL."""

    def query_param(self, name: str) -> str | None:
        """
        Read a query parameter from the current location.

        Args:
            name: Query parameter name

        Returns:
            First value of the parameter, or None when absent
        """
        ...


class Notifier(Protocol):
    """Port interface for user-facing notices."""

    def notify(self, title: str, message: str, level: str) -> None:
        """
        Surface a notice to the user.

        Args:
            title: Short heading
            message: Notice body
            level: "success" or "error"
        """
        ...
