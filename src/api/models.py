"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
Blank fields are accepted here on purpose: the domain controllers own
input validation and report it as a VALIDATION OperationError.
"""

from typing import Any

from pydantic import BaseModel, Field

from src.domain.models import DEFAULT_TARGET_URL, OperationError
from src.domain.ports import ErrorKind, LifecycleState, Region


class ProxyTestRequest(BaseModel):
    """Request model for a proxy test."""

    url: str = Field(DEFAULT_TARGET_URL, description="Target URL the proxy should fetch")
    region: str = Field(Region.US_EAST.value, description="Proxy region code")
    api_key: str = Field("", description="Proxy API key (never echoed back)")


class OperationErrorModel(BaseModel):
    """Serialized OperationError."""

    kind: ErrorKind
    message: str
    http_status: int | None = None
    field: str | None = None

    @classmethod
    def from_domain(cls, error: OperationError | None) -> "OperationErrorModel | None":
        if error is None:
            return None
        return cls(
            kind=error.kind,
            message=error.message,
            http_status=error.http_status,
            field=error.field_name,
        )


class ProxyTestState(BaseModel):
    """Snapshot of the proxy test controller."""

    status: LifecycleState
    response: Any = None
    response_text: str = ""
    html_artifact: str | None = None
    preview_iframe: str | None = None
    error: OperationErrorModel | None = None


class RegionsResponse(BaseModel):
    """Available proxy regions."""

    regions: list[str]


class ActivateRequest(BaseModel):
    """Request model for account activation."""

    new_password: str = Field("", description="New account password")
    confirm_password: str = Field("", description="Must equal new_password")


class ActivateResponse(BaseModel):
    """Response model for successful activation."""

    message: str
    redirect_to: str


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str
