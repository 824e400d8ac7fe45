"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures routes and lifespan events.

The process serves a single operator: it holds one in-memory session,
so every caller shares the same controllers and sees the same latest
proxy result and preview.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.adapters.http.httpx_dispatcher import HttpxRequestDispatcher, build_async_client
from src.adapters.notify.console import ConsoleNotifier
from src.api.v1 import router as v1_router
from src.config.settings import get_settings
from src.domain.activation import ActivationController
from src.domain.password_policy import PasswordPolicy
from src.domain.proxy_test import ProxyTestController

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "v1",
        "description": "Data Proxy Console API v1 - Test proxy requests and activate accounts",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Creates the shared httpx client and dispatcher on startup
    - Creates the session's proxy test and activation controllers
    - Closes the httpx client on shutdown
    """
    settings = get_settings()

    logger.info("Starting application...")
    logger.info("Request timeout: %ss", settings.request_timeout_seconds)

    client = build_async_client(settings)
    dispatcher = HttpxRequestDispatcher(client)

    # Store in app state for dependency injection
    app.state.proxy_test_controller = ProxyTestController(
        dispatcher=dispatcher,
        proxy_base_url=settings.proxy_base_url,
    )
    # The token locator is supplied per submit from the request URL
    app.state.activation_controller = ActivationController(
        dispatcher=dispatcher,
        locator=None,
        api_base_url=settings.api_base_url,
        notifier=ConsoleNotifier(),
        policy=PasswordPolicy(min_length=settings.password_min_length),
        login_path=settings.login_path,
    )

    logger.info("Application startup complete")

    yield

    # Shutdown
    logger.info("Shutting down application...")
    await client.aclose()
    logger.info("HTTP client closed")


app = FastAPI(
    title="dataproxy-console",
    description="Data Proxy Console - Multi-region proxy playground and account activation client",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

# Include v1 API routes
app.include_router(v1_router, prefix="/v1")


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}
