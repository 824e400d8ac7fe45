"""
Domain layer - Pure request lifecycle logic with zero framework imports.

This package contains the validation state machines for the proxy test
and account activation flows. It defines its own port interfaces for
infrastructure abstraction (HTTP dispatch, page locator, user notices),
so adapters can be swapped out in tests.
"""

from .activation import ActivationController
from .exceptions import ConsoleError, InvalidRequestSpec
from .models import (
    ActivationRequest,
    DispatchFailure,
    DispatchResult,
    DispatchSuccess,
    OperationError,
    PasswordForm,
    ProxyQuery,
    ProxyResult,
    RequestSpec,
)
from .password_policy import PasswordPolicy
from .ports import (
    ErrorKind,
    HttpMethod,
    LifecycleState,
    Locator,
    Notifier,
    Region,
    RequestDispatcher,
)
from .proxy_test import ProxyTestController

__all__ = [
    "ActivationController",
    "ActivationRequest",
    "ConsoleError",
    "DispatchFailure",
    "DispatchResult",
    "DispatchSuccess",
    "ErrorKind",
    "HttpMethod",
    "InvalidRequestSpec",
    "LifecycleState",
    "Locator",
    "Notifier",
    "OperationError",
    "PasswordForm",
    "PasswordPolicy",
    "ProxyQuery",
    "ProxyResult",
    "ProxyTestController",
    "Region",
    "RequestDispatcher",
    "RequestSpec",
]
