"""Test suite for compliance_autopilot."""
