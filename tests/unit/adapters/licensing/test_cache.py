"""Tests for the validation result cache."""

from compliance_autopilot.adapters.licensing.cache import ValidationCache
from compliance_autopilot.core.licensing.tiers import LicenseTier
from compliance_autopilot.core.licensing.types import ValidationResult
from tests.fixtures.licensing import FakeClock


class TestValidationCache:
    """Test ValidationCache."""

    def test_empty_cache_misses(self, validation_cache: ValidationCache) -> None:
        """A new cache holds nothing."""
        assert validation_cache.get() is None

    def test_returns_stored_result_within_ttl(
        self, validation_cache: ValidationCache, fake_clock: FakeClock
    ) -> None:
        """Stored results are returned until the TTL elapses."""
        result = ValidationResult.for_tier(LicenseTier.PRO)
        validation_cache.store(result)

        fake_clock.advance(299)

        assert validation_cache.get() is result

    def test_expires_after_ttl(
        self, validation_cache: ValidationCache, fake_clock: FakeClock
    ) -> None:
        """Results expire once the TTL has elapsed."""
        validation_cache.store(ValidationResult.for_tier(LicenseTier.PRO))

        fake_clock.advance(300)

        assert validation_cache.get() is None

    def test_store_replaces_and_restarts_ttl(
        self, validation_cache: ValidationCache, fake_clock: FakeClock
    ) -> None:
        """The newest store wins and its TTL starts at store time."""
        validation_cache.store(ValidationResult.for_tier(LicenseTier.STARTER))
        fake_clock.advance(200)
        newer = ValidationResult.for_tier(LicenseTier.ENTERPRISE)
        validation_cache.store(newer)
        fake_clock.advance(200)

        assert validation_cache.get() is newer

    def test_default_ttl_is_five_minutes(self) -> None:
        """Default lifetime matches the license API contract."""
        assert ValidationCache().ttl_seconds == 300
