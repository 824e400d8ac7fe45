"""
Activation controller - Token exchange for a newly chosen password.

State Machine
=============

    IDLE --activate()--> validating --ok--> IN_FLIGHT --payload--> SUCCEEDED
                                   |                  --error----> FAILED
                                   +--invalid--> IDLE

Checks run in a fixed order before anything touches the network:
1. Activation token present in the page locator
2. Password strength (PasswordPolicy)
3. Confirmation equals the new password

On SUCCEEDED the password form is cleared and redirect_to points at the
login surface. Errors are surfaced verbatim and never retried.
"""

import logging

from .models import (
    ActivationRequest,
    DispatchFailure,
    DispatchSuccess,
    OperationError,
    PasswordForm,
    RequestSpec,
)
from .password_policy import PasswordPolicy
from .ports import ErrorKind, HttpMethod, LifecycleState, Locator, Notifier, RequestDispatcher

logger = logging.getLogger(__name__)

TOKEN_PARAM = "token"


class ActivationController:
    """
    Owns the account activation pipeline for one session.

    Observable state: status, error, redirect_to.
    """

    def __init__(
        self,
        dispatcher: RequestDispatcher,
        locator: Locator | None,
        api_base_url: str,
        notifier: Notifier | None = None,
        policy: PasswordPolicy | None = None,
        login_path: str = "/login",
    ) -> None:
        self._dispatcher = dispatcher
        self._locator = locator
        self._api_base_url = api_base_url.rstrip("/")
        self._notifier = notifier
        self._policy = policy or PasswordPolicy()
        self._login_path = login_path
        self.status = LifecycleState.IDLE
        self.error: OperationError | None = None
        self.redirect_to: str | None = None

    async def activate(self, form: PasswordForm, locator: Locator | None = None) -> None:
        """
        Validate the form, exchange the token, and record the outcome.

        Args:
            form: User-typed password fields; cleared in place on success
            locator: Page the token is read from for this submit; defaults
                to the locator given at construction
        """
        if self.status is LifecycleState.IN_FLIGHT:
            logger.warning("Activation already in flight, ignoring re-submit")
            return

        self.error = None
        self.redirect_to = None

        if locator is None:
            locator = self._locator
        token = locator.query_param(TOKEN_PARAM) if locator is not None else None
        if not token or not token.strip():
            self._reject(
                OperationError(
                    kind=ErrorKind.VALIDATION,
                    message="Activation token is missing.",
                    field_name=TOKEN_PARAM,
                )
            )
            self._notify("Error", "Activation token is missing.", "error")
            return

        invalid = self._policy.check(form.new_password, form.confirm_password)
        if invalid is not None:
            self._reject(invalid)
            return

        request = ActivationRequest(
            token=token,
            new_password=form.new_password,
            confirm_password=form.confirm_password,
        )
        spec = self.build_request(request)
        self.status = LifecycleState.IN_FLIGHT
        logger.info("Submitting account activation")

        try:
            outcome = await self._dispatcher.dispatch(spec)
        except Exception:
            logger.exception("Dispatcher raised during activation")
            outcome = DispatchFailure(
                OperationError(kind=ErrorKind.UNKNOWN, message="Unexpected error while sending request")
            )

        if isinstance(outcome, DispatchSuccess):
            form.clear()
            self.status = LifecycleState.SUCCEEDED
            self.redirect_to = self._login_path
            logger.info("Account activated")
            self._notify("Success!", "Account activated successfully.", "success")
        elif isinstance(outcome, DispatchFailure):
            self.error = outcome.error.redacted(token, request.new_password)
            self.status = LifecycleState.FAILED
            logger.info("Account activation failed (kind=%s)", self.error.kind.value)
            self._notify("Something went wrong.", self.error.message, "error")

    def build_request(self, request: ActivationRequest) -> RequestSpec:
        """Build POST {api_base}/v2/activate for a validated request."""
        return RequestSpec(
            method=HttpMethod.POST,
            url=f"{self._api_base_url}/v2/activate",
            headers={
                "Content-Type": "application/json",
                "Accept": "application/json",
            },
            body=request.to_body(),
        )

    def _reject(self, error: OperationError) -> None:
        self.error = error
        self.status = LifecycleState.IDLE
        logger.info("Activation rejected before dispatch (field=%s)", error.field_name)

    def _notify(self, title: str, message: str, level: str) -> None:
        if self._notifier is not None:
            self._notifier.notify(title, message, level)
