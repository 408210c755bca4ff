"""Concurrent candidate fetching across photo providers and query variants."""
from __future__ import annotations

import asyncio
import logging
from typing import Iterable, List, Optional, Sequence

from src.core.schemas import ImageCandidate, PhotoProviderName, SearchOptions
from src.services.base import PhotoProvider

logger = logging.getLogger(__name__)

DEFAULT_TARGET_POOL_SIZE = 10
DEFAULT_REQUEST_TIMEOUT_S = 12.0


class CandidateFetcher:
    """Collects image candidates for a list of query variants.

    Variants are tried one after another. For each variant every enabled
    provider is queried concurrently and their results are awaited together;
    a failing provider never cancels the others. Fetching stops as soon as the
    pool holds ``target_pool_size`` raw candidates.
    """

    def __init__(
        self,
        providers: Sequence[PhotoProvider],
        *,
        target_pool_size: int = DEFAULT_TARGET_POOL_SIZE,
        request_timeout_s: float = DEFAULT_REQUEST_TIMEOUT_S,
    ) -> None:
        self.providers = list(providers)
        self.target_pool_size = target_pool_size
        self.request_timeout_s = request_timeout_s

    def active_providers(
        self, enabled_providers: Optional[Iterable[PhotoProviderName]] = None
    ) -> List[PhotoProvider]:
        """Providers that are both configured and requested by the caller."""

        wanted = None if enabled_providers is None else {PhotoProviderName(p) for p in enabled_providers}
        return [
            provider
            for provider in self.providers
            if provider.enabled and (wanted is None or provider.name in wanted)
        ]

    async def _search(
        self, provider: PhotoProvider, variant: str, options: SearchOptions
    ) -> List[ImageCandidate]:
        return await asyncio.wait_for(provider.search(variant, options), timeout=self.request_timeout_s)

    async def fetch(
        self,
        variants: Sequence[str],
        enabled_providers: Optional[Iterable[PhotoProviderName]] = None,
        options: Optional[SearchOptions] = None,
    ) -> List[ImageCandidate]:
        """Return the candidate pool in fetch order. Never raises for provider failures."""

        providers = self.active_providers(enabled_providers)
        if not providers:
            logger.info("No photo providers configured; skipping candidate fetch")
            return []

        options = options or SearchOptions()
        pool: List[ImageCandidate] = []
        for variant in variants:
            logger.debug("Trying variant %r against %d providers", variant, len(providers))
            results = await asyncio.gather(
                *(self._search(provider, variant, options) for provider in providers),
                return_exceptions=True,
            )
            for provider, result in zip(providers, results):
                if isinstance(result, asyncio.CancelledError):
                    raise result
                if isinstance(result, BaseException):
                    logger.warning(
                        "%s search failed for %r: %s",
                        provider.name.value,
                        variant,
                        repr(result),
                    )
                    continue
                pool.extend(result)

            if len(pool) >= self.target_pool_size:
                break

        logger.debug("Fetched %d candidates", len(pool))
        return pool
