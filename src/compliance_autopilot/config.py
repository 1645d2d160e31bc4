"""Settings loaded from the environment."""

import os

DEFAULT_LICENSE_API = "https://compliance-autopilot-license.taylsec.workers.dev/validate"


class Settings:
    """Licensing settings loaded from environment."""

    def __init__(self) -> None:
        """Load settings from environment variables."""
        self.license_key = os.getenv("LICENSE_KEY", "").strip()
        self.license_api_url = os.getenv("LICENSE_API_URL", "").strip() or DEFAULT_LICENSE_API

        # Validation cache and request bounds
        self.license_cache_ttl_seconds = float(os.getenv("LICENSE_CACHE_TTL_SECONDS", "300"))
        self.license_timeout_seconds = float(os.getenv("LICENSE_TIMEOUT_SECONDS", "5"))

        # "true" skips the license API entirely and runs on the free tier
        self.license_validation_disabled = (
            os.getenv("LICENSE_VALIDATION_DISABLED", "false").lower() == "true"
        )
