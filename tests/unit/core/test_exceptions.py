"""Tests for domain exceptions."""

import pytest

from compliance_autopilot.core.exceptions import (
    ComplianceAutopilotError,
    LicenseKeyNotFoundError,
    LicenseRequiredError,
    LicenseServiceUnavailableError,
    LicenseTimeoutError,
    LicenseValidationError,
    MalformedLicenseResponseError,
)


class TestLicenseValidationErrors:
    """Test the license validation error taxonomy."""

    @pytest.mark.parametrize(
        "error_class,code",
        [
            (LicenseKeyNotFoundError, "KeyNotFound"),
            (LicenseServiceUnavailableError, "ServiceUnavailable"),
            (LicenseTimeoutError, "Timeout"),
            (MalformedLicenseResponseError, "MalformedResponse"),
        ],
    )
    def test_codes(self, error_class: type[LicenseValidationError], code: str) -> None:
        """Each failure category carries its code."""
        error = error_class("details")

        assert error.code == code
        assert error.message == "details"
        assert isinstance(error, LicenseValidationError)
        assert isinstance(error, ComplianceAutopilotError)


class TestLicenseRequiredError:
    """Test LicenseRequiredError."""

    def test_attributes(self) -> None:
        """Blocked features and prompt are kept on the error."""
        error = LicenseRequiredError(
            "Private repository scanning requires a paid license.",
            blocked_features=("private-repos",),
            upgrade_prompt="banner",
        )

        assert str(error) == "Private repository scanning requires a paid license."
        assert error.blocked_features == ("private-repos",)
        assert error.upgrade_prompt == "banner"

    def test_defaults(self) -> None:
        """Blocked features and prompt are optional."""
        error = LicenseRequiredError("nope")

        assert error.blocked_features == ()
        assert error.upgrade_prompt is None
        assert isinstance(error, ComplianceAutopilotError)
