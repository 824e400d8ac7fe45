"""
Domain models - Value objects exchanged by the dispatcher and controllers.

Plain dataclasses only. Secrets (api keys, passwords, activation tokens)
are excluded from every repr so they cannot leak through logs or
tracebacks.
"""

import json
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import urlsplit

from .exceptions import InvalidRequestSpec
from .ports import ErrorKind, HttpMethod, Region

DEFAULT_TARGET_URL = "https://www.google.com/search?q=flowers&udm=2"


@dataclass(frozen=True)
class RequestSpec:
    """
    Outbound HTTP request.

    Validated on construction: the URL must be an absolute http(s) URL
    and header names must be unique regardless of case.

    Raises:
        InvalidRequestSpec: If any precondition is violated
    """

    method: HttpMethod
    url: str
    headers: dict[str, str] = field(default_factory=dict, repr=False)
    body: Any = field(default=None, repr=False)

    def __post_init__(self) -> None:
        try:
            method = HttpMethod(self.method)
        except ValueError:
            raise InvalidRequestSpec(f"Unsupported method: {self.method!r}") from None
        object.__setattr__(self, "method", method)

        if not self.url or not self.url.strip():
            raise InvalidRequestSpec("Request URL is empty")
        parts = urlsplit(self.url)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise InvalidRequestSpec(f"Request URL is not absolute: {self.url!r}")

        seen: set[str] = set()
        for name in self.headers:
            key = name.lower()
            if key in seen:
                raise InvalidRequestSpec(f"Duplicate header: {name!r}")
            seen.add(key)


@dataclass(frozen=True)
class OperationError:
    """
    Normalized failure of one pipeline step.

    field_name names the offending input for validation errors
    (e.g. "confirm_password"); http_status is set whenever a
    response was received. from_server marks a message copied from
    the response body rather than composed locally.
    """

    kind: ErrorKind
    message: str
    http_status: int | None = None
    field_name: str | None = None
    from_server: bool = field(default=False, compare=False)

    def redacted(self, *secrets: str) -> "OperationError":
        """
        Return a copy whose message has every non-empty secret masked.

        Only server-supplied messages can echo a secret; locally composed
        ones such as "HTTP error 403" are returned untouched.
        """
        if not self.from_server:
            return self
        message = self.message
        for secret in secrets:
            if secret:
                message = message.replace(secret, "***")
        if message == self.message:
            return self
        return OperationError(
            kind=self.kind,
            message=message,
            http_status=self.http_status,
            field_name=self.field_name,
            from_server=True,
        )


@dataclass(frozen=True)
class DispatchSuccess:
    """Dispatcher outcome: parsed JSON body of a 2xx response."""

    payload: Any


@dataclass(frozen=True)
class DispatchFailure:
    """Dispatcher outcome: the call failed."""

    error: OperationError


DispatchResult = DispatchSuccess | DispatchFailure


@dataclass
class ProxyQuery:
    """User-entered fields of a proxy test request."""

    target_url: str = DEFAULT_TARGET_URL
    region: str = Region.US_EAST.value
    api_key: str = field(default="", repr=False)


@dataclass(frozen=True)
class ProxyResult:
    """
    Outcome of a successful proxy test.

    html_artifact is untrusted markup taken from the "result" field of raw.
    """

    raw: Any
    html_artifact: str | None = None

    @classmethod
    def from_payload(cls, payload: Any) -> "ProxyResult":
        artifact = None
        if isinstance(payload, dict) and isinstance(payload.get("result"), str):
            artifact = payload["result"]
        return cls(raw=payload, html_artifact=artifact)

    def pretty(self) -> str:
        """Raw JSON indented for display."""
        return json.dumps(self.raw, indent=2)


@dataclass
class PasswordForm:
    """The two user-typed fields of the activation form."""

    new_password: str = field(default="", repr=False)
    confirm_password: str = field(default="", repr=False)

    def clear(self) -> None:
        self.new_password = ""
        self.confirm_password = ""


@dataclass(frozen=True)
class ActivationRequest:
    """Token exchange payload. The token comes from the page locator."""

    token: str = field(repr=False)
    new_password: str = field(repr=False)
    confirm_password: str = field(repr=False)

    def to_body(self) -> dict[str, str]:
        return {"token": self.token, "new_password": self.new_password}
