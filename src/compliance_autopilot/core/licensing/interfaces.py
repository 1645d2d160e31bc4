"""Protocol definitions for license validators."""

from typing import Protocol, runtime_checkable

from compliance_autopilot.core.licensing.types import ValidationResult


@runtime_checkable
class LicenseValidator(Protocol):
    """Protocol for pluggable license validation backends.

    Implementations:
    - RemoteLicenseValidator: License key lookup against the hosted API
    - OpenCoreLicenseValidator: Free tier only (no external dependencies)
    """

    async def validate(self, license_key: str | None = None) -> ValidationResult:
        """Resolve a license key to a tier.

        Implementations never raise for a bad key or an unreachable
        service; they fall back to the free tier and report the reason
        in the result.

        Args:
            license_key: Opaque license key, None or blank for no license.

        Returns:
            Validation result with the resolved tier.
        """
        ...
