"""License gate - validate the caller's license and enforce it on a scan."""

from dataclasses import dataclass

import structlog

from compliance_autopilot.core.exceptions import LicenseRequiredError
from compliance_autopilot.core.licensing.enforcer import (
    PRICING_URL,
    PRIVATE_REPOS,
    enforce,
    tier_display_name,
    upgrade_prompt,
)
from compliance_autopilot.core.licensing.interfaces import LicenseValidator
from compliance_autopilot.core.licensing.types import (
    EnforcementContext,
    EnforcementResult,
    ValidationResult,
)

logger = structlog.get_logger()


@dataclass(frozen=True)
class LicenseDecision:
    """Validation and enforcement outcome for one scan request."""

    validation: ValidationResult
    enforcement: EnforcementResult
    upgrade_prompt: str | None = None

    @property
    def allowed(self) -> bool:
        return self.enforcement.allowed


class LicenseGate:
    """Runs license checks ahead of a compliance scan.

    The scan orchestrator resolves the license once, then checks each
    version of the request against it. Visibility of the repository is
    often only known after the code host has been queried, so ``check``
    is cheap to call again with an updated context.
    """

    def __init__(self, validator: LicenseValidator):
        self.validator = validator

    async def resolve(self, license_key: str | None) -> ValidationResult:
        """Resolve the license key and log the tier in use."""
        validation = await self.validator.validate(license_key)

        logger.info(
            "license_tier_resolved",
            tier=validation.tier.value,
            display_name=tier_display_name(validation.tier),
        )
        if validation.error:
            logger.warning(
                "license_warning",
                error=validation.error,
                code=validation.error_code,
            )

        return validation

    def check(
        self,
        validation: ValidationResult,
        context: EnforcementContext,
    ) -> LicenseDecision:
        """Enforce the resolved tier on a requested scan."""
        enforcement = enforce(validation.limits, context)

        for warning in enforcement.warnings:
            logger.warning("license_restriction", tier=enforcement.tier.value, message=warning)

        prompt = None
        if enforcement.blocked_features:
            prompt = upgrade_prompt(enforcement.blocked_features)
            logger.info(
                "license_upgrade_available",
                blocked_features=list(enforcement.blocked_features),
                prompt=prompt,
            )

        return LicenseDecision(
            validation=validation,
            enforcement=enforcement,
            upgrade_prompt=prompt,
        )

    def require(self, decision: LicenseDecision) -> LicenseDecision:
        """Pass an allowed decision through, raise for one that is not.

        Raises:
            LicenseRequiredError: If the request cannot run on this tier.
        """
        if decision.allowed:
            return decision

        enforcement = decision.enforcement
        if PRIVATE_REPOS in enforcement.blocked_features:
            message = (
                "Private repository scanning requires a paid license. "
                f"Get one at {PRICING_URL}"
            )
        else:
            message = (
                f"No requested compliance framework is available on the "
                f"{tier_display_name(enforcement.tier)} plan."
            )

        raise LicenseRequiredError(
            message,
            blocked_features=enforcement.blocked_features,
            upgrade_prompt=decision.upgrade_prompt,
        )

    async def authorize(
        self,
        license_key: str | None,
        context: EnforcementContext,
    ) -> LicenseDecision:
        """Resolve, check and require in one step.

        Raises:
            LicenseRequiredError: If the request cannot run on this tier.
        """
        validation = await self.resolve(license_key)
        return self.require(self.check(validation, context))
