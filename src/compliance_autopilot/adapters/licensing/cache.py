"""Single-entry TTL cache for license validation results."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass

from compliance_autopilot.core.licensing.types import ValidationResult

DEFAULT_TTL_SECONDS = 5 * 60


@dataclass(frozen=True)
class _CacheEntry:
    result: ValidationResult
    expires_at: float


class ValidationCache:
    """Holds the most recent successful validation for a bounded time.

    The entry is swapped for a new immutable one on every store and is
    never modified in place, so concurrent validations on one event loop
    can only race to overwrite it (last writer wins).

    Usage:
        cache = ValidationCache(ttl_seconds=300)
        validator = RemoteLicenseValidator(cache=cache)
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the cache.

        Args:
            ttl_seconds: Lifetime of a stored result.
            clock: Monotonic time source, replaceable in tests.
        """
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entry: _CacheEntry | None = None

    def get(self) -> ValidationResult | None:
        """Return the cached result, or None if empty or expired."""
        entry = self._entry
        if entry is None or self._clock() >= entry.expires_at:
            return None
        return entry.result

    def store(self, result: ValidationResult) -> None:
        """Replace the cached result; the TTL starts now."""
        self._entry = _CacheEntry(result=result, expires_at=self._clock() + self.ttl_seconds)
