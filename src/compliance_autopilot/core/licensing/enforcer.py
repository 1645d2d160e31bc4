"""License enforcement - reconcile a requested scan with tier limits.

Every gate is evaluated independently and in a fixed order, which is also
the order warnings are reported in:

1. Private repositories (hard gate, makes the request not allowed)
2. Compliance frameworks (degrades to the available subset)
3. PDF reports (degrades to JSON)
4. Slack notifications (degrades to no notifications)

Enforcement never raises; infeasible requests come back with
``allowed=False``.
"""

from __future__ import annotations

from collections.abc import Iterable

from compliance_autopilot.core.licensing.tiers import (
    LicenseTier,
    TierLimits,
    framework_id,
)
from compliance_autopilot.core.licensing.types import (
    EnforcementContext,
    EnforcementResult,
    ReportFormat,
)

UPGRADE_URL = "https://github.com/m0rphsec/compliance-autopilot"
PRICING_URL = f"{UPGRADE_URL}#-pricing"

PRIVATE_REPOS = "private-repos"
PDF_REPORTS = "pdf-reports"
SLACK_INTEGRATION = "slack-integration"
FRAMEWORK_PREFIX = "framework-"

TIER_DISPLAY_NAMES: dict[LicenseTier, str] = {
    LicenseTier.FREE: "Free",
    LicenseTier.STARTER: "Starter ($149/mo)",
    LicenseTier.PRO: "Pro ($299/mo)",
    LicenseTier.ENTERPRISE: "Enterprise",
}

_BOX_WIDTH = 62


class LicenseEnforcer:
    """Applies one tier's limits to requested scan operations.

    Usage:
        enforcer = LicenseEnforcer(validation.limits)
        result = enforcer.enforce(context)
        if not result.allowed:
            ...
    """

    def __init__(self, limits: TierLimits) -> None:
        """Initialize the enforcer.

        Args:
            limits: Limits of the caller's tier.
        """
        self.limits = limits

    def enforce(self, context: EnforcementContext) -> EnforcementResult:
        """Check which features are allowed and adjust the request.

        Args:
            context: Requested scan operation.

        Returns:
            Adjusted request with warnings and blocked feature tags.
        """
        limits = self.limits
        warnings: list[str] = []
        blocked: list[str] = []

        if context.is_private_repo and not limits.private_repos:
            blocked.append(PRIVATE_REPOS)
            warnings.append(
                "Private repository scanning requires a paid plan. "
                f"Upgrade at {PRICING_URL}"
            )

        requested = [framework_id(fw) for fw in context.requested_frameworks]
        kept = [fw for fw in requested if limits.has_framework(fw)]
        dropped = [fw for fw in requested if not limits.has_framework(fw)]
        if dropped:
            blocked.extend(f"{FRAMEWORK_PREFIX}{fw}" for fw in dropped)
            warnings.append(
                f"Framework(s) {', '.join(dropped)} require a paid plan. "
                f"Using available frameworks: {', '.join(kept)}"
            )

        report_format = ReportFormat.parse(context.report_format)
        if report_format.includes_pdf and not limits.pdf_reports:
            blocked.append(PDF_REPORTS)
            report_format = ReportFormat.JSON
            warnings.append("PDF reports require Starter plan or higher. Using JSON format.")

        if context.notification_webhook and not limits.slack_integration:
            blocked.append(SLACK_INTEGRATION)
            warnings.append(
                "Slack integration requires Pro plan or higher. Slack notifications disabled."
            )

        allowed = bool(kept) and (limits.private_repos or not context.is_private_repo)

        return EnforcementResult(
            allowed=allowed,
            tier=limits.tier,
            warnings=tuple(warnings),
            blocked_features=tuple(blocked),
            adjusted_frameworks=tuple(kept),
            adjusted_report_format=report_format,
        )


def enforce(limits: TierLimits, context: EnforcementContext) -> EnforcementResult:
    """Apply ``limits`` to ``context``. See LicenseEnforcer.enforce."""
    return LicenseEnforcer(limits).enforce(context)


def tier_display_name(tier: LicenseTier | str) -> str:
    """Get a user-facing label for a tier, "Free" if unrecognized."""
    return TIER_DISPLAY_NAMES[LicenseTier.parse(tier)]


def _box_line(text: str) -> str:
    return f"║  {text.ljust(_BOX_WIDTH - 2)}║"


def upgrade_prompt(blocked_features: Iterable[str]) -> str:
    """Build the upgrade banner for a set of blocked feature tags.

    Bullets always appear in the same order regardless of the order of
    ``blocked_features``; tags without a bullet are ignored.

    Args:
        blocked_features: Tags from EnforcementResult.blocked_features.

    Returns:
        Multi-line banner for terminal or log output.
    """
    blocked = list(blocked_features)
    rule = "═" * _BOX_WIDTH

    lines = [
        "",
        f"╔{rule}╗",
        _box_line("UPGRADE TO UNLOCK MORE FEATURES"),
        f"╠{rule}╣",
    ]

    if PRIVATE_REPOS in blocked:
        lines.append(_box_line("✓ Private repository scanning"))
    if any(tag.startswith(FRAMEWORK_PREFIX) for tag in blocked):
        lines.append(_box_line("✓ All compliance frameworks (SOC2, GDPR, ISO27001, HIPAA)"))
    if PDF_REPORTS in blocked:
        lines.append(_box_line("✓ Professional PDF reports for auditors"))
    if SLACK_INTEGRATION in blocked:
        lines.append(_box_line("✓ Slack alerts for compliance violations"))

    lines.append(_box_line(""))
    lines.append(_box_line(f"-> {UPGRADE_URL}"))
    lines.append(f"╚{rule}╝")
    lines.append("")

    return "\n".join(lines)
