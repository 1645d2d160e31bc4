"""Licensing module for tier resolution and feature gating.

The validator factory lives in ``compliance_autopilot.core.licensing.config``
and is not re-exported here, since it depends on the adapters.
"""

from compliance_autopilot.core.licensing.enforcer import (
    LicenseEnforcer,
    enforce,
    tier_display_name,
    upgrade_prompt,
)
from compliance_autopilot.core.licensing.interfaces import LicenseValidator
from compliance_autopilot.core.licensing.tiers import (
    TIER_LIMITS,
    UNLIMITED,
    ComplianceFramework,
    LicenseTier,
    TierLimits,
    get_tier_limits,
)
from compliance_autopilot.core.licensing.types import (
    EnforcementContext,
    EnforcementResult,
    ReportFormat,
    ValidationResult,
)

__all__ = [
    "ComplianceFramework",
    "EnforcementContext",
    "EnforcementResult",
    "LicenseEnforcer",
    "LicenseTier",
    "LicenseValidator",
    "ReportFormat",
    "TIER_LIMITS",
    "TierLimits",
    "UNLIMITED",
    "ValidationResult",
    "enforce",
    "get_tier_limits",
    "tier_display_name",
    "upgrade_prompt",
]
