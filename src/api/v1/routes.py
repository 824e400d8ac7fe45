"""
API v1 routes.

Thin presentation boundary over the domain controllers. Routes translate
HTTP input into domain calls and controller state back into JSON; they
hold no lifecycle logic of their own.
"""

from fastapi import APIRouter, Depends, HTTPException, Response, status

from src.adapters.locator.url import UrlLocator
from src.api.dependencies import (
    get_activation_controller,
    get_page_locator,
    get_proxy_test_controller,
)
from src.api.models import (
    ActivateRequest,
    ActivateResponse,
    ErrorResponse,
    OperationErrorModel,
    ProxyTestRequest,
    ProxyTestState,
    RegionsResponse,
)
from src.api.preview import iframe_srcdoc, sandboxed_response
from src.domain.activation import ActivationController
from src.domain.models import OperationError, PasswordForm, ProxyQuery
from src.domain.ports import ErrorKind, LifecycleState, Region
from src.domain.proxy_test import ProxyTestController

router = APIRouter(tags=["v1"])


def _snapshot(controller: ProxyTestController) -> ProxyTestState:
    result = controller.result
    return ProxyTestState(
        status=controller.status,
        response=result.raw if result else None,
        response_text=result.pretty() if result else "",
        html_artifact=result.html_artifact if result else None,
        preview_iframe=(
            iframe_srcdoc(result.html_artifact)
            if result and result.html_artifact is not None
            else None
        ),
        error=OperationErrorModel.from_domain(controller.error),
    )


def _status_code_for(error: OperationError) -> int:
    """
    Map an OperationError onto the status code returned to the caller.

    Only upstream 4xx/5xx statuses are passed through; anything else
    (e.g. an unfollowed 3xx) becomes 502.
    """
    if error.kind is ErrorKind.VALIDATION:
        return 422
    if (
        error.kind is ErrorKind.SERVER_REJECTED
        and error.http_status is not None
        and 400 <= error.http_status < 600
    ):
        return error.http_status
    return status.HTTP_502_BAD_GATEWAY


@router.get(
    "/playground/regions",
    response_model=RegionsResponse,
    summary="List proxy regions",
)
async def list_regions() -> RegionsResponse:
    """Return the fixed set of proxy region codes in display order."""
    return RegionsResponse(regions=Region.codes())


@router.post(
    "/playground/test",
    response_model=ProxyTestState,
    responses={
        409: {"model": ErrorResponse, "description": "A test request is already in flight"},
    },
    summary="Send a proxy test request",
    description="Submit a target URL, region and API key to the proxy service. "
    "The response reports the lifecycle status, raw JSON and any HTML artifact.",
)
async def run_proxy_test(
    request_data: ProxyTestRequest,
    controller: ProxyTestController = Depends(get_proxy_test_controller),
) -> ProxyTestState:
    """
    Run one proxy test and return the controller snapshot.

    Failures are reported inside the snapshot, not as HTTP errors.
    """
    if controller.status is LifecycleState.IN_FLIGHT:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="A test request is already in flight",
        )
    await controller.run_test(
        ProxyQuery(
            target_url=request_data.url,
            region=request_data.region,
            api_key=request_data.api_key,
        )
    )
    return _snapshot(controller)


@router.get(
    "/playground/state",
    response_model=ProxyTestState,
    summary="Current proxy test state",
)
async def get_proxy_test_state(
    controller: ProxyTestController = Depends(get_proxy_test_controller),
) -> ProxyTestState:
    """Return the latest status, result and error without dispatching."""
    return _snapshot(controller)


@router.get(
    "/playground/preview",
    response_class=Response,
    responses={
        200: {"content": {"text/html": {}}, "description": "Sandboxed HTML artifact"},
        404: {"model": ErrorResponse, "description": "No artifact available"},
    },
    summary="Open HTML artifact preview",
)
async def preview_artifact(
    controller: ProxyTestController = Depends(get_proxy_test_controller),
) -> Response:
    """Serve the latest HTML artifact under a sandbox Content-Security-Policy."""
    result = controller.result
    if result is None or result.html_artifact is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No preview available",
        )
    return sandboxed_response(result.html_artifact)


@router.post(
    "/activate",
    response_model=ActivateResponse,
    responses={
        409: {"model": ErrorResponse, "description": "An activation is already in flight"},
        422: {"model": ErrorResponse, "description": "Missing token or invalid password"},
        502: {"model": ErrorResponse, "description": "Activation service unreachable"},
    },
    summary="Activate account with token",
    description="Exchange the one-time activation token from the `token` query "
    "parameter plus a new password for an activated account.",
)
async def activate(
    request_data: ActivateRequest,
    controller: ActivationController = Depends(get_activation_controller),
    locator: UrlLocator = Depends(get_page_locator),
) -> ActivateResponse:
    """
    Activate an account.

    - **new_password**: New password (minimum 8 characters)
    - **confirm_password**: Must match new_password exactly
    """
    if controller.status is LifecycleState.IN_FLIGHT:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="An activation is already in flight",
        )
    form = PasswordForm(
        new_password=request_data.new_password,
        confirm_password=request_data.confirm_password,
    )
    await controller.activate(form, locator)

    if controller.status is LifecycleState.SUCCEEDED and controller.redirect_to:
        return ActivateResponse(
            message="Account activated successfully.",
            redirect_to=controller.redirect_to,
        )

    error = controller.error or OperationError(
        kind=ErrorKind.UNKNOWN, message="Failed to activate account"
    )
    raise HTTPException(status_code=_status_code_for(error), detail=error.message)
