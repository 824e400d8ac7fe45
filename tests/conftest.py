"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- A static page locator carrying an activation token
- A recording fake dispatcher

Test doubles themselves live in tests/helpers.py.
"""

import pytest

from tests.helpers import FakeDispatcher, StaticLocator, ok


@pytest.fixture
def locator() -> StaticLocator:
    """Locator carrying a valid activation token."""
    return StaticLocator(token="tok-123")


@pytest.fixture
def dispatcher() -> FakeDispatcher:
    """Dispatcher that answers every call with an empty JSON object."""
    return FakeDispatcher(ok({}))
