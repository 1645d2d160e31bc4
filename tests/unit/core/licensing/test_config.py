"""Tests for license validator configuration."""

from unittest.mock import patch

from compliance_autopilot.adapters.licensing.cache import ValidationCache
from compliance_autopilot.adapters.licensing.opencore import OpenCoreLicenseValidator
from compliance_autopilot.adapters.licensing.remote import RemoteLicenseValidator
from compliance_autopilot.config import DEFAULT_LICENSE_API, Settings
from compliance_autopilot.core.licensing import LicenseValidator
from compliance_autopilot.core.licensing.config import build_license_validator


class TestSettings:
    """Test environment-driven settings."""

    @patch.dict("os.environ", {}, clear=True)
    def test_defaults(self) -> None:
        """Unset variables fall back to the hosted API and standard bounds."""
        settings = Settings()

        assert settings.license_key == ""
        assert settings.license_api_url == DEFAULT_LICENSE_API
        assert settings.license_cache_ttl_seconds == 300
        assert settings.license_timeout_seconds == 5
        assert settings.license_validation_disabled is False

    @patch.dict(
        "os.environ",
        {
            "LICENSE_KEY": "  CA-PRO-1234  ",
            "LICENSE_API_URL": "https://license.internal/validate",
            "LICENSE_CACHE_TTL_SECONDS": "60",
            "LICENSE_TIMEOUT_SECONDS": "2.5",
            "LICENSE_VALIDATION_DISABLED": "TRUE",
        },
        clear=True,
    )
    def test_overrides(self) -> None:
        """Environment variables override the defaults."""
        settings = Settings()

        assert settings.license_key == "CA-PRO-1234"
        assert settings.license_api_url == "https://license.internal/validate"
        assert settings.license_cache_ttl_seconds == 60
        assert settings.license_timeout_seconds == 2.5
        assert settings.license_validation_disabled is True

    @patch.dict("os.environ", {"LICENSE_API_URL": "   "}, clear=True)
    def test_blank_api_url_uses_default(self) -> None:
        """A blank API URL is the same as an unset one."""
        assert Settings().license_api_url == DEFAULT_LICENSE_API


class TestBuildLicenseValidator:
    """Test validator factory function."""

    @patch.dict("os.environ", {}, clear=True)
    def test_returns_remote_by_default(self) -> None:
        """Should return RemoteLicenseValidator when nothing is configured."""
        validator = build_license_validator()

        assert isinstance(validator, RemoteLicenseValidator)
        assert isinstance(validator, LicenseValidator)
        assert validator.endpoint == DEFAULT_LICENSE_API
        assert validator.timeout_seconds == 5

    @patch.dict("os.environ", {"LICENSE_VALIDATION_DISABLED": "true"}, clear=True)
    def test_returns_opencore_when_disabled(self) -> None:
        """Should return OpenCoreLicenseValidator when validation is disabled."""
        validator = build_license_validator()

        assert isinstance(validator, OpenCoreLicenseValidator)

    @patch.dict(
        "os.environ",
        {"LICENSE_API_URL": "https://license.internal/validate", "LICENSE_CACHE_TTL_SECONDS": "30"},
        clear=True,
    )
    def test_applies_settings(self) -> None:
        """Endpoint and cache TTL come from settings."""
        validator = build_license_validator()

        assert isinstance(validator, RemoteLicenseValidator)
        assert validator.endpoint == "https://license.internal/validate"
        assert validator.cache.ttl_seconds == 30

    @patch.dict("os.environ", {}, clear=True)
    def test_new_instance_per_call(self) -> None:
        """Each call builds an isolated validator and cache."""
        first = build_license_validator()
        second = build_license_validator()

        assert first is not second
        assert isinstance(first, RemoteLicenseValidator)
        assert isinstance(second, RemoteLicenseValidator)
        assert first.cache is not second.cache

    @patch.dict("os.environ", {}, clear=True)
    def test_shared_cache(self) -> None:
        """A caller-owned cache can be shared between validators."""
        cache = ValidationCache()

        first = build_license_validator(cache=cache)
        second = build_license_validator(cache=cache)

        assert isinstance(first, RemoteLicenseValidator)
        assert isinstance(second, RemoteLicenseValidator)
        assert first.cache is second.cache is cache
