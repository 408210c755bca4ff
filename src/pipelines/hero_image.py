"""Destination hero image resolution.

Ties the pieces together: the identity is classified and expanded into query
variants, the fetcher gathers candidates from the photo providers, the scorer
picks the best one, and when nothing survives a fixed fallback chain takes
over (web fallback, bundled asset, caller default). The chain always ends
with a URL; only a missing identity is treated as a caller error.
"""
from __future__ import annotations

import logging
import random
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Union
from urllib.parse import quote

from src.core.hints import get_hero_image_hints
from src.core.keywords import build_keyword_set
from src.core.schemas import (
    ASSET_SOURCE,
    DEFAULT_SOURCE,
    WEB_FALLBACK_SOURCE,
    DestinationIdentity,
    HeroImageResult,
    ResolveOptions,
    SemanticBucket,
)
from src.core.scoring import ExclusionSet, ScoredCandidate, select_best
from src.core.variants import classify_buckets, expand_variants
from src.pipelines.fetcher import CandidateFetcher

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_ASSETS: List[str] = [f"/assets/{index}.jpg" for index in range(1, 9)]
WEB_FALLBACK_URL = "https://source.unsplash.com/featured/{size}/?{query}"

IdentityInput = Union[DestinationIdentity, Mapping[str, Any]]


def build_web_fallback(query: str, size: str = "1600x900") -> str:
    """Return a generic "featured photo" search URL for ``query``."""

    return WEB_FALLBACK_URL.format(size=size, query=quote(query, safe=""))


def coerce_identity(identity: Any) -> DestinationIdentity:
    """Validate caller input into a ``DestinationIdentity``.

    Raises:
        ValueError: when no identity was given at all, or it has the wrong shape.
    """

    if isinstance(identity, DestinationIdentity):
        return identity
    if isinstance(identity, str):
        return DestinationIdentity(query=identity)
    if isinstance(identity, Mapping):
        return DestinationIdentity.model_validate(dict(identity))
    raise ValueError(f"Expected a destination identity, got {type(identity).__name__}")


def _result_from_candidate(best: ScoredCandidate) -> HeroImageResult:
    candidate = best.candidate
    return HeroImageResult(
        url=candidate.url,
        thumbnail_url=candidate.thumbnail_url,
        source=candidate.provider.value,
        attribution=candidate.attribution,
        meta={
            "provider": candidate.provider.value,
            "width": candidate.width,
            "height": candidate.height,
            "likes": candidate.popularity,
            "score": best.score,
            "text": candidate.descriptive_text.lower(),
        },
    )


class HeroImageResolver:
    """Resolve one hero image per destination.

    Attributes:
        fetcher: Candidate fetcher wrapping the configured photo providers
        assets: Bundled generic travel images used by the asset fallback
        rng: Random source used only to pick a fallback asset
    """

    def __init__(
        self,
        fetcher: CandidateFetcher,
        *,
        assets: Optional[Sequence[str]] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.fetcher = fetcher
        self.assets = list(assets or DEFAULT_FALLBACK_ASSETS)
        self.rng = rng or random.Random()

    def _pick_asset(self, pool: Sequence[str], exclusion: ExclusionSet) -> Optional[str]:
        available = [asset for asset in pool if asset not in exclusion]
        if not available:
            return None
        return self.rng.choice(available)

    def _fallback(
        self,
        query: str,
        is_city: bool,
        options: ResolveOptions,
        exclusion: ExclusionSet,
    ) -> HeroImageResult:
        """Walk the fallback chain; every tier registers what it hands out."""

        pool = options.assets or self.assets

        def accept(url: str, source: str) -> HeroImageResult:
            exclusion.add(url)
            logger.info("Using %s hero image for %r: %s", source, query, url)
            return HeroImageResult(url=url, source=source, meta={"query": query})

        if query and not options.skip_web_fallback:
            suffix = "cityscape" if is_city else "scenic landmark"
            web_url = build_web_fallback(f"{query} {suffix}", options.web_size)
            if web_url not in exclusion:
                return accept(web_url, WEB_FALLBACK_SOURCE)

        if not options.skip_asset_fallback:
            asset = self._pick_asset(pool, exclusion)
            if asset:
                return accept(asset, ASSET_SOURCE)

        if options.default_url and options.default_url not in exclusion:
            return accept(options.default_url, DEFAULT_SOURCE)

        # Every tier is used up: a duplicate beats no image at all.
        if options.default_url:
            return accept(options.default_url, DEFAULT_SOURCE)
        return accept(self.rng.choice(pool), ASSET_SOURCE)

    async def resolve(
        self,
        identity: IdentityInput,
        options: Optional[ResolveOptions] = None,
        exclusion: Optional[ExclusionSet] = None,
    ) -> HeroImageResult:
        """Return the best hero image for ``identity``.

        Args:
            identity: Destination identity (model, mapping or bare query string).
            options: Caller overrides; defaults apply when omitted.
            exclusion: Shared set of already used URLs. Pass the same instance
                for every destination of a batch to avoid duplicate heroes.

        Raises:
            ValueError: if ``identity`` is missing or malformed.
        """

        identity = coerce_identity(identity)
        options = options or ResolveOptions()
        exclusion = exclusion if exclusion is not None else ExclusionSet()

        query = identity.display_query
        if not query:
            logger.info("Destination has no name or query; using asset fallback")
            return self._fallback("", False, options, exclusion)

        buckets = classify_buckets(identity)
        hints = get_hero_image_hints(identity)
        keywords = build_keyword_set(
            identity,
            buckets,
            hints,
            banned=options.banned_keywords,
            preferred=options.preferred_keywords,
        )
        variants = expand_variants(identity, options.query_variants, hints=hints, buckets=buckets)

        candidates = await self.fetcher.fetch(variants, options.providers, options.search)
        best = select_best(candidates, keywords, exclusion)
        if best is not None:
            exclusion.add(best.candidate.url)
            logger.info(
                "Selected %s hero image for %r (score %d)",
                best.candidate.provider.value,
                query,
                best.score,
            )
            return _result_from_candidate(best)

        logger.info("No usable candidates among %d for %r", len(candidates), query)
        return self._fallback(query, SemanticBucket.CITY in buckets, options, exclusion)

    async def resolve_many(
        self,
        identities: Iterable[IdentityInput],
        options: Optional[ResolveOptions] = None,
        exclusion: Optional[ExclusionSet] = None,
    ) -> List[HeroImageResult]:
        """Resolve a batch in order, sharing one exclusion set across it."""

        exclusion = exclusion if exclusion is not None else ExclusionSet()
        results: List[HeroImageResult] = []
        for identity in identities:
            results.append(await self.resolve(identity, options, exclusion))
        return results


async def resolve_hero_image(
    identity: IdentityInput,
    fetcher: CandidateFetcher,
    options: Optional[ResolveOptions] = None,
    exclusion: Optional[ExclusionSet] = None,
    *,
    rng: Optional[random.Random] = None,
) -> HeroImageResult:
    """One-off convenience wrapper around ``HeroImageResolver.resolve``."""

    resolver = HeroImageResolver(fetcher, rng=rng)
    return await resolver.resolve(identity, options, exclusion)
