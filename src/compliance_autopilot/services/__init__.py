"""Application services."""

from compliance_autopilot.services.license_gate import LicenseDecision, LicenseGate

__all__ = [
    "LicenseDecision",
    "LicenseGate",
]
