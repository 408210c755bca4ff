"""Helpers that write a resolved hero image onto a destination record."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, MutableMapping, Optional

from src.core.schemas import DestinationIdentity, DestinationLocation, HeroImageResult, ResolveOptions
from src.core.scoring import ExclusionSet
from src.pipelines.hero_image import HeroImageResolver


def needs_hero_image(record: MutableMapping[str, Any], force: bool = False) -> bool:
    """A record gets a new hero only when it has none or a refresh is forced."""

    return force or not (record.get("heroImage") or record.get("image"))


def identity_from_record(record: MutableMapping[str, Any]) -> DestinationIdentity:
    """Build the identity of a destination document (flat or nested location)."""

    location: Dict[str, Any] = dict(record.get("location") or {})
    for key in ("city", "state", "country"):
        if not location.get(key) and isinstance(record.get(key), str):
            location[key] = record[key]

    return DestinationIdentity(
        name=record.get("name"),
        query=record.get("query"),
        slug=record.get("slug"),
        category=record.get("category") if isinstance(record.get("category"), str) else None,
        tags=record.get("tags") or [],
        aliases=record.get("aliases") or [],
        location=DestinationLocation.model_validate(
            {key: location.get(key) for key in DestinationLocation.model_fields if isinstance(location.get(key), str)}
        ),
    )


def apply_hero_image(
    record: MutableMapping[str, Any],
    result: HeroImageResult,
    timestamp: Optional[datetime] = None,
) -> MutableMapping[str, Any]:
    """Store ``result`` on the record and put it first in the gallery."""

    timestamp = timestamp or datetime.now(timezone.utc)

    record["heroImage"] = result.url
    record["image"] = result.url
    record["heroImageSource"] = result.source
    record["heroImageUpdatedAt"] = timestamp
    if result.attribution:
        record["heroImageAttribution"] = result.attribution
    if result.thumbnail_url and not record.get("heroImageThumbnail"):
        record["heroImageThumbnail"] = result.thumbnail_url
    if result.meta and not record.get("heroImageMeta"):
        record["heroImageMeta"] = dict(result.meta)

    gallery = record.get("gallery")
    if isinstance(gallery, list):
        if gallery:
            gallery[0] = result.url
        else:
            gallery.append(result.url)
    else:
        record["gallery"] = [result.url, result.thumbnail_url] if result.thumbnail_url else [result.url]
    return record


async def ensure_hero_image(
    record: MutableMapping[str, Any],
    resolver: HeroImageResolver,
    *,
    exclusion: Optional[ExclusionSet] = None,
    options: Optional[ResolveOptions] = None,
    force: bool = False,
    timestamp: Optional[datetime] = None,
) -> MutableMapping[str, Any]:
    """Resolve and apply a hero image unless the record already has one."""

    if not needs_hero_image(record, force):
        if exclusion is not None:
            exclusion.add(record.get("heroImage") or record.get("image"))
        return record

    result = await resolver.resolve(identity_from_record(record), options, exclusion)
    return apply_hero_image(record, result, timestamp)
