"""
Unit tests for domain ports and exceptions.

Tests verify:
- Enumerations are properly defined
- Exceptions are properly structured
- Domain purity (zero framework imports)
"""

import subprocess
from enum import Enum

import pytest

from src.domain.exceptions import ConsoleError, InvalidRequestSpec
from src.domain.ports import ErrorKind, HttpMethod, LifecycleState, Region


class TestLifecycleStateEnum:
    """Tests for LifecycleState enum."""

    def test_lifecycle_state_is_enum(self) -> None:
        """LifecycleState is an Enum class."""
        assert issubclass(LifecycleState, Enum)

    def test_lifecycle_state_values(self) -> None:
        """LifecycleState has exactly the four lifecycle values."""
        assert [s.value for s in LifecycleState] == [
            "idle",
            "in_flight",
            "succeeded",
            "failed",
        ]

    def test_lifecycle_state_is_str(self) -> None:
        """LifecycleState serializes as its string value."""
        assert LifecycleState.IN_FLIGHT == "in_flight"


class TestErrorKindEnum:
    """Tests for ErrorKind enum."""

    def test_error_kind_values(self) -> None:
        """ErrorKind covers the four failure classes."""
        assert {k.value for k in ErrorKind} == {
            "validation",
            "transport",
            "server_rejected",
            "unknown",
        }


class TestHttpMethodEnum:
    """Tests for HttpMethod enum."""

    def test_only_get_and_post(self) -> None:
        """Dispatcher only supports GET and POST."""
        assert {m.value for m in HttpMethod} == {"GET", "POST"}


class TestRegionEnum:
    """Tests for the closed region set."""

    def test_nine_regions(self) -> None:
        """There are exactly nine proxy regions."""
        assert len(Region.codes()) == 9

    def test_region_display_order(self) -> None:
        """Region codes keep their display order, us-east first."""
        assert Region.codes() == [
            "us-east",
            "us-west",
            "us-central",
            "northamerica-northeast",
            "southamerica",
            "asia",
            "australia",
            "europe",
            "middle-east",
        ]

    def test_unknown_region_rejected(self) -> None:
        """Unknown region codes are not members."""
        with pytest.raises(ValueError):
            Region("mars-central")


class TestDomainExceptions:
    """Tests for domain exception hierarchy."""

    def test_invalid_request_spec_inherits_console_error(self) -> None:
        """InvalidRequestSpec is a ConsoleError."""
        assert issubclass(InvalidRequestSpec, ConsoleError)

    def test_invalid_request_spec_is_value_error(self) -> None:
        """InvalidRequestSpec can be caught as ValueError."""
        with pytest.raises(ValueError):
            raise InvalidRequestSpec("bad url")


class TestDomainPurity:
    """Tests for domain purity - zero framework imports."""

    @pytest.mark.parametrize("module", ["fastapi", "pydantic", "httpx", "starlette"])
    def test_no_framework_imports_in_domain(self, module: str) -> None:
        """Domain layer imports no web, validation or HTTP frameworks."""
        result = subprocess.run(
            ["grep", "-rE", f"^(from|import) {module}", "src/domain/"],
            capture_output=True,
            text=True,
        )
        assert result.returncode != 0, f"{module} import found: {result.stdout}"
