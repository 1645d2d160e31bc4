"""Domain-specific exceptions.

All exceptions in compliance_autopilot inherit from ComplianceAutopilotError,
making it easy to catch all package errors while still being able
to handle specific error types.
"""

from __future__ import annotations


class ComplianceAutopilotError(Exception):
    """Base exception for all compliance_autopilot errors."""

    pass


class LicenseValidationError(ComplianceAutopilotError):
    """License key could not be resolved to a tier.

    Raised by the remote license API call and converted into a free-tier
    ValidationResult at the validator boundary. Never reaches the caller
    of ``validate``.

    Attributes:
        code: Machine-readable failure category.
    """

    code = "ValidationFailed"

    def __init__(self, message: str) -> None:
        """Initialize LicenseValidationError.

        Args:
            message: Error description.
        """
        super().__init__(message)
        self.message = message


class LicenseKeyNotFoundError(LicenseValidationError):
    """The license API does not know this key (HTTP 404).

    This is a definitive answer from the server, not a transport failure.
    """

    code = "KeyNotFound"


class LicenseServiceUnavailableError(LicenseValidationError):
    """The license API answered with a non-2xx status or could not be reached."""

    code = "ServiceUnavailable"


class LicenseTimeoutError(LicenseValidationError):
    """The license API did not answer within the configured timeout."""

    code = "Timeout"


class MalformedLicenseResponseError(LicenseValidationError):
    """The license API answered with a body that does not match the contract."""

    code = "MalformedResponse"


class LicenseRequiredError(ComplianceAutopilotError):
    """The requested operation cannot run on the current license tier.

    Raised when enforcement reports the request as not allowed, e.g. a
    private repository scan on the free tier. Framework, report format and
    notification restrictions degrade instead and never raise this.

    Attributes:
        blocked_features: Feature tags denied for the request.
        upgrade_prompt: Formatted upgrade block for terminal output.
    """

    def __init__(
        self,
        message: str,
        blocked_features: tuple[str, ...] = (),
        upgrade_prompt: str | None = None,
    ) -> None:
        """Initialize LicenseRequiredError.

        Args:
            message: Error description.
            blocked_features: Feature tags denied for the request.
            upgrade_prompt: Formatted upgrade block, if any.
        """
        super().__init__(message)
        self.blocked_features = blocked_features
        self.upgrade_prompt = upgrade_prompt
