from __future__ import annotations

import logging
import random
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Union

import httpx

from src.core.config import ApiSettings
from src.core.schemas import DestinationIdentity, HeroImageResult, ResolveOptions
from src.core.scoring import ExclusionSet
from src.pipelines.fetcher import CandidateFetcher
from src.pipelines.hero_image import HeroImageResolver
from src.services import create_photo_providers

logger = logging.getLogger(__name__)


class HeroImageService:
    """Container for the hero image resolver and its dependencies.

    Owns the single ``httpx.AsyncClient`` shared by every photo provider
    adapter, so connections are pooled across requests and closed once on
    shutdown.

    Attributes:
        settings: Provider credentials and tuning knobs
        http_client: Shared async HTTP client
        providers: Photo provider adapters in priority order
        fetcher: Concurrent candidate fetcher over the providers
        resolver: Hero image resolver with the fallback chain
    """

    def __init__(
        self,
        settings: ApiSettings,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.settings = settings
        self.http_client = http_client or httpx.AsyncClient(
            headers={"accept": "application/json"},
            timeout=httpx.Timeout(settings.request_timeout_s, connect=5.0),
        )
        self.providers = create_photo_providers(settings, self.http_client)
        self.fetcher = CandidateFetcher(
            self.providers,
            target_pool_size=settings.target_pool_size,
            request_timeout_s=settings.request_timeout_s,
        )
        self.resolver = HeroImageResolver(self.fetcher, rng=rng)

        configured = settings.configured_providers()
        if configured:
            logger.info("Hero image providers configured: %s", ", ".join(configured))
        else:
            logger.warning("No photo provider credentials found; hero images will use fallbacks")

    async def resolve(
        self,
        identity: Union[DestinationIdentity, Mapping[str, Any]],
        options: Optional[ResolveOptions] = None,
        exclude_urls: Iterable[str] = (),
    ) -> HeroImageResult:
        """Resolve a single destination against a fresh exclusion set."""

        return await self.resolver.resolve(identity, options, ExclusionSet(exclude_urls))

    async def resolve_batch(
        self,
        identities: Sequence[Union[DestinationIdentity, Mapping[str, Any]]],
        options: Optional[ResolveOptions] = None,
        exclude_urls: Iterable[str] = (),
    ) -> List[HeroImageResult]:
        """Resolve a list of destinations sharing one exclusion set."""

        return await self.resolver.resolve_many(identities, options, ExclusionSet(exclude_urls))

    async def close(self) -> None:
        """Close the shared HTTP client."""

        await self.http_client.aclose()
