"""License tier registry and per-tier limit definitions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

# Numeric limits use -1 for "no cap"
UNLIMITED = -1


class LicenseTier(str, Enum):
    """Subscription tiers, ordered from most to least restrictive."""

    FREE = "free"
    STARTER = "starter"
    PRO = "pro"
    ENTERPRISE = "enterprise"

    @classmethod
    def parse(cls, value: Any) -> LicenseTier:
        """Resolve a tier label, degrading anything unrecognized to FREE."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                return cls.FREE
        return cls.FREE

    @classmethod
    def is_known(cls, value: Any) -> bool:
        """Check whether a label names a tier rather than degrading to FREE."""
        if isinstance(value, cls):
            return True
        return isinstance(value, str) and value.strip().lower() in cls._value2member_map_

    @property
    def rank(self) -> int:
        return _TIER_ORDER.index(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LicenseTier):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LicenseTier):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LicenseTier):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LicenseTier):
            return NotImplemented
        return self.rank >= other.rank


_TIER_ORDER = (
    LicenseTier.FREE,
    LicenseTier.STARTER,
    LicenseTier.PRO,
    LicenseTier.ENTERPRISE,
)


class ComplianceFramework(str, Enum):
    """Compliance frameworks a scan can evaluate."""

    SOC2 = "soc2"
    GDPR = "gdpr"
    ISO27001 = "iso27001"
    HIPAA = "hipaa"


def framework_id(framework: ComplianceFramework | str) -> str:
    """Return the plain identifier for a framework enum member or string."""
    if isinstance(framework, Enum):
        return str(framework.value)
    return str(framework)


@dataclass(frozen=True)
class TierLimits:
    """Capabilities and caps granted by a license tier.

    Attributes:
        tier: Tier these limits belong to.
        private_repos: Whether non-public repositories may be scanned.
        max_private_repos: Cap on private repositories, UNLIMITED for none.
        frameworks: Frameworks usable at this tier.
        max_scans_per_month: Monthly scan cap, UNLIMITED for none.
        pdf_reports: Whether PDF reports may be generated.
        slack_integration: Whether chat notifications may be sent.
        custom_controls: Whether custom controls may be defined.
        priority_support: Whether the tier includes priority support.
    """

    tier: LicenseTier
    private_repos: bool
    max_private_repos: int
    frameworks: tuple[ComplianceFramework, ...]
    max_scans_per_month: int
    pdf_reports: bool
    slack_integration: bool
    custom_controls: bool
    priority_support: bool

    def has_framework(self, framework: ComplianceFramework | str) -> bool:
        """Check whether a framework identifier is available at this tier."""
        wanted = framework_id(framework)
        return any(fw.value == wanted for fw in self.frameworks)


_BASE_FRAMEWORKS = (
    ComplianceFramework.SOC2,
    ComplianceFramework.GDPR,
    ComplianceFramework.ISO27001,
)

# Tier limit definitions - what each tier includes
TIER_LIMITS: dict[LicenseTier, TierLimits] = {
    LicenseTier.FREE: TierLimits(
        tier=LicenseTier.FREE,
        private_repos=False,
        max_private_repos=0,
        frameworks=(ComplianceFramework.SOC2,),
        max_scans_per_month=100,
        pdf_reports=False,
        slack_integration=False,
        custom_controls=False,
        priority_support=False,
    ),
    LicenseTier.STARTER: TierLimits(
        tier=LicenseTier.STARTER,
        private_repos=True,
        max_private_repos=1,
        frameworks=_BASE_FRAMEWORKS,
        max_scans_per_month=UNLIMITED,
        pdf_reports=True,
        slack_integration=False,
        custom_controls=False,
        priority_support=False,
    ),
    LicenseTier.PRO: TierLimits(
        tier=LicenseTier.PRO,
        private_repos=True,
        max_private_repos=5,
        frameworks=_BASE_FRAMEWORKS,
        max_scans_per_month=UNLIMITED,
        pdf_reports=True,
        slack_integration=True,
        custom_controls=True,
        priority_support=True,
    ),
    LicenseTier.ENTERPRISE: TierLimits(
        tier=LicenseTier.ENTERPRISE,
        private_repos=True,
        max_private_repos=UNLIMITED,
        frameworks=(*_BASE_FRAMEWORKS, ComplianceFramework.HIPAA),
        max_scans_per_month=UNLIMITED,
        pdf_reports=True,
        slack_integration=True,
        custom_controls=True,
        priority_support=True,
    ),
}


def get_tier_limits(tier: LicenseTier | str | None) -> TierLimits:
    """Get limits for a tier.

    Unknown or missing tier labels resolve to the FREE limits so a stale
    label never blocks the caller.

    Args:
        tier: Tier enum member or raw tier label.

    Returns:
        Limits for the tier, FREE limits if the tier is not recognized.
    """
    return TIER_LIMITS.get(LicenseTier.parse(tier), TIER_LIMITS[LicenseTier.FREE])
