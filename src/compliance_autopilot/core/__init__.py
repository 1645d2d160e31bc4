"""Core domain - tiers, licensing types and enforcement policy.

Nothing in core performs I/O; network access lives in the adapters.
"""
