"""License-tier enforcement for compliance-autopilot."""

__version__ = "1.0.0"
