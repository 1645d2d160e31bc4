"""Licensing domain types.

Validation results describe which tier a license key resolved to.
Enforcement contexts and results describe one requested scan and the
adjusted version of it that the tier permits. All of them are immutable.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum

from compliance_autopilot.core.licensing.tiers import (
    ComplianceFramework,
    LicenseTier,
    TierLimits,
    get_tier_limits,
)


class ReportFormat(str, Enum):
    """Report output formats."""

    JSON = "json"
    PDF = "pdf"
    BOTH = "both"

    @classmethod
    def parse(cls, value: ReportFormat | str | None) -> ReportFormat:
        """Resolve a format label, treating anything unrecognized as JSON."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                return cls.JSON
        return cls.JSON

    @property
    def includes_pdf(self) -> bool:
        return self in (ReportFormat.PDF, ReportFormat.BOTH)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of resolving a license key to a tier.

    ``valid`` means the key resolved without error, not that the tier is
    paid: running without a key is a valid free-tier state. An invalid
    result is always on the free tier.

    Attributes:
        valid: Whether resolution finished without error.
        tier: Resolved tier.
        expires_at: License expiry reported by the server, if any.
        error: Human-readable reason for falling back to free.
        error_code: Machine-readable failure category, if any.
    """

    valid: bool
    tier: LicenseTier
    expires_at: datetime | None = None
    error: str | None = None
    error_code: str | None = None

    @property
    def limits(self) -> TierLimits:
        return get_tier_limits(self.tier)

    @classmethod
    def for_tier(
        cls,
        tier: LicenseTier,
        expires_at: datetime | None = None,
    ) -> ValidationResult:
        """Build a successful result for a resolved tier."""
        return cls(valid=True, tier=tier, expires_at=expires_at)

    @classmethod
    def free(
        cls,
        error: str | None = None,
        error_code: str | None = None,
    ) -> ValidationResult:
        """Build a free-tier result, invalid when an error is given."""
        return cls(
            valid=error is None,
            tier=LicenseTier.FREE,
            error=error,
            error_code=error_code,
        )


@dataclass(frozen=True)
class EnforcementContext:
    """A requested scan operation, as seen by the enforcer.

    Attributes:
        is_private_repo: Whether the target repository is non-public.
        requested_frameworks: Framework identifiers, in request order.
        report_format: Requested report format.
        repo_count: Number of repositories covered by the request, if known.
        notification_webhook: Chat webhook URL, if notifications were requested.
    """

    is_private_repo: bool
    requested_frameworks: tuple[ComplianceFramework | str, ...]
    report_format: ReportFormat | str = ReportFormat.JSON
    repo_count: int | None = None
    notification_webhook: str | None = None

    def with_private_repo(self, is_private_repo: bool) -> EnforcementContext:
        """Return a copy with the repository visibility replaced."""
        return replace(self, is_private_repo=is_private_repo)


@dataclass(frozen=True)
class EnforcementResult:
    """The request as the tier permits it.

    Warnings are user-facing and ordered by gate. Blocked feature tags are
    the machine-readable record of what was denied.

    Attributes:
        allowed: Whether the adjusted request may proceed.
        tier: Tier the limits belong to.
        warnings: Messages to surface before proceeding.
        blocked_features: Tags of denied capabilities.
        adjusted_frameworks: Frameworks to run, in request order.
        adjusted_report_format: Report format to produce.
    """

    allowed: bool
    tier: LicenseTier
    warnings: tuple[str, ...]
    blocked_features: tuple[str, ...]
    adjusted_frameworks: tuple[str, ...]
    adjusted_report_format: ReportFormat
