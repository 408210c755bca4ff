"""Configuration helpers for API keys and environment variables."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List, Optional


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise RuntimeError(f"Invalid float for {name}: {raw!r}") from None


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"Invalid integer for {name}: {raw!r}") from None


@dataclass(slots=True)
class ApiSettings:
    """Centralised container for the photo provider credentials and tuning knobs."""

    unsplash_access_key: Optional[str] = None
    pexels_api_key: Optional[str] = None
    sentry_dsn: Optional[str] = None
    request_timeout_s: float = 12.0
    target_pool_size: int = 10

    @classmethod
    def from_env(cls) -> "ApiSettings":
        """Load settings from the process environment."""

        return cls(
            unsplash_access_key=os.getenv("UNSPLASH_ACCESS_KEY") or None,
            pexels_api_key=os.getenv("PEXELS_API_KEY") or None,
            sentry_dsn=os.getenv("SENTRY_DSN") or None,
            request_timeout_s=_env_float("HERO_IMAGE_TIMEOUT", 12.0),
            target_pool_size=_env_int("HERO_IMAGE_POOL_SIZE", 10),
        )

    def configured_providers(self) -> List[str]:
        """Return the provider names that have credentials configured."""

        providers: List[str] = []
        if self.unsplash_access_key:
            providers.append("unsplash")
        if self.pexels_api_key:
            providers.append("pexels")
        return providers
