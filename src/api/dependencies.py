"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting the
session's domain controllers into routes.
"""

from fastapi import Request

from src.adapters.locator.url import UrlLocator
from src.domain.activation import ActivationController
from src.domain.proxy_test import ProxyTestController


def get_proxy_test_controller(request: Request) -> ProxyTestController:
    """
    Get the session's proxy test controller.

    One controller lives for the whole in-memory session, so its
    re-entry guard spans concurrent requests.
    """
    return request.app.state.proxy_test_controller


def get_activation_controller(request: Request) -> ActivationController:
    """
    Get the session's activation controller.

    Created during app lifespan startup and shared by every request,
    so a second submit while one is in flight is seen by the guard.
    """
    return request.app.state.activation_controller


def get_page_locator(request: Request) -> UrlLocator:
    """The request URL is the page locator the activation token is read from."""
    return UrlLocator(str(request.url))
