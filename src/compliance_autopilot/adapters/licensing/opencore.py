"""OpenCore license validator - free tier with no external dependencies."""

from compliance_autopilot.core.licensing.tiers import LicenseTier
from compliance_autopilot.core.licensing.types import ValidationResult


class OpenCoreLicenseValidator:
    """Validator for deployments with license validation turned off.

    Always resolves to the FREE tier and never contacts the license API,
    whatever key is supplied.
    """

    async def validate(self, license_key: str | None = None) -> ValidationResult:
        """Resolve any key to the FREE tier."""
        return ValidationResult.for_tier(LicenseTier.FREE)
