"""License validator adapters."""

from compliance_autopilot.adapters.licensing.cache import ValidationCache
from compliance_autopilot.adapters.licensing.opencore import OpenCoreLicenseValidator
from compliance_autopilot.adapters.licensing.remote import (
    LicenseApiResponse,
    RemoteLicenseValidator,
)

__all__ = [
    "LicenseApiResponse",
    "OpenCoreLicenseValidator",
    "RemoteLicenseValidator",
    "ValidationCache",
]
