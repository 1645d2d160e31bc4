"""License validator factory configuration."""

from compliance_autopilot.adapters.licensing.cache import ValidationCache
from compliance_autopilot.adapters.licensing.opencore import OpenCoreLicenseValidator
from compliance_autopilot.adapters.licensing.remote import RemoteLicenseValidator
from compliance_autopilot.config import Settings
from compliance_autopilot.core.licensing.interfaces import LicenseValidator


def build_license_validator(
    settings: Settings | None = None,
    cache: ValidationCache | None = None,
) -> LicenseValidator:
    """Build a license validator from settings.

    Selection priority:
    1. LICENSE_VALIDATION_DISABLED=true -> OpenCoreLicenseValidator (free tier)
    2. Otherwise -> RemoteLicenseValidator against LICENSE_API_URL

    A new validator is returned on every call. Callers that want cached
    results across validations keep the instance, or pass a shared cache.

    Args:
        settings: Settings to use, loaded from the environment if omitted.
        cache: Result cache, a fresh one using the configured TTL if omitted.

    Returns:
        Configured license validator instance
    """
    settings = settings or Settings()

    if settings.license_validation_disabled:
        return OpenCoreLicenseValidator()

    return RemoteLicenseValidator(
        endpoint=settings.license_api_url,
        cache=cache or ValidationCache(ttl_seconds=settings.license_cache_ttl_seconds),
        timeout_seconds=settings.license_timeout_seconds,
    )
