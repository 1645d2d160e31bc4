"""Tests for OpenCore license validator."""

import pytest

from compliance_autopilot.adapters.licensing.opencore import OpenCoreLicenseValidator
from compliance_autopilot.core.licensing import LicenseTier, LicenseValidator


class TestOpenCoreLicenseValidator:
    """Test OpenCoreLicenseValidator implementation."""

    @pytest.fixture
    def validator(self) -> OpenCoreLicenseValidator:
        """Create validator instance."""
        return OpenCoreLicenseValidator()

    def test_implements_protocol(self, validator: OpenCoreLicenseValidator) -> None:
        """Validator should implement LicenseValidator protocol."""
        assert isinstance(validator, LicenseValidator)

    @pytest.mark.asyncio
    async def test_any_key_is_free(self, validator: OpenCoreLicenseValidator) -> None:
        """OpenCore always resolves to FREE, even for a paid key."""
        result = await validator.validate("CA-ENT-0000-FFFF")

        assert result.valid is True
        assert result.tier == LicenseTier.FREE
        assert result.error is None

    @pytest.mark.asyncio
    async def test_no_key_is_free(self, validator: OpenCoreLicenseValidator) -> None:
        """No key resolves to FREE."""
        result = await validator.validate()

        assert result.tier == LicenseTier.FREE
