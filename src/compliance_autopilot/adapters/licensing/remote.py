"""License validator backed by the hosted license API.

Resolves a license key with a single GET request:

    GET <endpoint>?key=<license key>
    -> {"valid": true, "tier": "pro", "expiresAt": "2026-12-31T00:00:00Z"}

Failures never reach the caller. A missing key, a rejected key, an
unreachable API or a garbled response all resolve to the free tier, so
a licensing outage degrades features instead of blocking scans.
"""

from __future__ import annotations

import asyncio
from datetime import datetime

import httpx
import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from compliance_autopilot.adapters.licensing.cache import ValidationCache
from compliance_autopilot.config import DEFAULT_LICENSE_API
from compliance_autopilot.core.exceptions import (
    LicenseKeyNotFoundError,
    LicenseServiceUnavailableError,
    LicenseTimeoutError,
    LicenseValidationError,
    MalformedLicenseResponseError,
)
from compliance_autopilot.core.licensing.tiers import LicenseTier
from compliance_autopilot.core.licensing.types import ValidationResult

logger = structlog.get_logger()

USER_AGENT = "compliance-autopilot/1.0.0"
DEFAULT_TIMEOUT_SECONDS = 5.0


class LicenseApiResponse(BaseModel):
    """Body returned by the license API."""

    model_config = ConfigDict(populate_by_name=True)

    valid: bool
    tier: str = LicenseTier.FREE.value
    expires_at: datetime | None = Field(default=None, alias="expiresAt")
    error: str | None = None


def _key_hint(license_key: str) -> str:
    """Mask a license key for logging."""
    return f"...{license_key[-4:]}" if len(license_key) > 4 else "..."


class RemoteLicenseValidator:
    """Validates license keys against the license API.

    Successful lookups are cached for the lifetime of the cache entry.
    Rejected keys and failures are not cached, so the next call asks the
    API again.
    """

    def __init__(
        self,
        endpoint: str = DEFAULT_LICENSE_API,
        cache: ValidationCache | None = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        user_agent: str = USER_AGENT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the validator.

        Args:
            endpoint: License API validation URL.
            cache: Result cache, shared with other validators if desired.
            timeout_seconds: Upper bound on one API call.
            user_agent: User-Agent header sent to the API.
            transport: Optional httpx transport, mainly for tests.
        """
        self.endpoint = endpoint
        self.cache = cache or ValidationCache()
        self.timeout_seconds = timeout_seconds
        self.user_agent = user_agent
        self._transport = transport

    async def validate(self, license_key: str | None = None) -> ValidationResult:
        """Resolve a license key to a tier.

        Args:
            license_key: Opaque license key, None or blank for no license.

        Returns:
            Result for the resolved tier, or a free-tier result carrying
            the reason the key could not be used.
        """
        if not license_key or not license_key.strip():
            return ValidationResult.for_tier(LicenseTier.FREE)

        cached = self.cache.get()
        if cached is not None:
            logger.debug("license_cache_hit", tier=cached.tier.value)
            return cached

        key = license_key.strip()

        try:
            response = await self._call_api(key)
        except LicenseKeyNotFoundError as e:
            logger.info("license_key_rejected", key_hint=_key_hint(key), error=e.message)
            return ValidationResult.free(error=e.message, error_code=e.code)
        except LicenseValidationError as e:
            logger.warning(
                "license_validation_failed",
                key_hint=_key_hint(key),
                error=e.message,
                code=e.code,
                fallback_tier=LicenseTier.FREE.value,
            )
            return ValidationResult.free(error=e.message, error_code=e.code)

        if not response.valid:
            error = response.error or "Invalid license key"
            logger.info("license_key_rejected", key_hint=_key_hint(key), error=error)
            return ValidationResult.free(error=error, error_code="InvalidKey")

        tier = LicenseTier.parse(response.tier)
        if not LicenseTier.is_known(response.tier):
            logger.warning("unknown_license_tier", tier=response.tier, fallback_tier=tier.value)

        result = ValidationResult.for_tier(tier, expires_at=response.expires_at)
        self.cache.store(result)

        logger.info(
            "license_validated",
            key_hint=_key_hint(key),
            tier=tier.value,
            expires_at=response.expires_at.isoformat() if response.expires_at else None,
        )

        return result

    async def _call_api(self, license_key: str) -> LicenseApiResponse:
        """Call the license validation API.

        Args:
            license_key: Stripped, non-empty license key.

        Returns:
            Parsed API response.

        Raises:
            LicenseKeyNotFoundError: If the API answered 404.
            LicenseServiceUnavailableError: On other non-2xx or transport errors.
            LicenseTimeoutError: If the call exceeded the timeout.
            MalformedLicenseResponseError: If the body is not a valid response.
        """
        headers = {
            "Accept": "application/json",
            "User-Agent": self.user_agent,
        }

        try:
            async with asyncio.timeout(self.timeout_seconds):
                async with httpx.AsyncClient(
                    transport=self._transport,
                    timeout=self.timeout_seconds,
                    follow_redirects=True,
                ) as client:
                    response = await client.get(
                        self.endpoint,
                        params={"key": license_key},
                        headers=headers,
                    )
        except (TimeoutError, httpx.TimeoutException) as e:
            raise LicenseTimeoutError(
                f"License validation timed out after {self.timeout_seconds:g}s"
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise LicenseServiceUnavailableError(f"License API unreachable: {e}") from e

        if response.status_code == 404:
            raise LicenseKeyNotFoundError("License key not found")

        if not response.is_success:
            raise LicenseServiceUnavailableError(
                f"License API returned {response.status_code}"
            )

        try:
            return LicenseApiResponse.model_validate(response.json())
        except ValueError as e:
            # ValidationError subclasses ValueError, as does JSONDecodeError
            detail = "invalid schema" if isinstance(e, ValidationError) else "invalid JSON"
            raise MalformedLicenseResponseError(
                f"Malformed license API response: {detail}"
            ) from e
