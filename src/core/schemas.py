"""Pydantic data models for destination hero image resolution.

This module contains the data models shared by the query expander, the photo
provider adapters, the scorer and the resolver. Only ``HeroImageResult`` ever
leaves the library; everything else lives for the duration of one resolution.

Key model categories:
- DestinationIdentity: the structured description of a destination to illustrate
- ImageCandidate: a provider photo normalised into a provider-agnostic shape
- KeywordSet: negative/preferred/extra/positive keyword lists used for scoring
- SearchOptions / ResolveOptions: knobs passed by callers
- HeroImageResult: the chosen image (or fallback) returned to the caller
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from src.core.types import ImageSize, Keyword, PerPage, PixelSize, Popularity


class PhotoProviderName(str, Enum):
    """Supported stock photo providers."""

    UNSPLASH = "unsplash"
    PEXELS = "pexels"


class SemanticBucket(str, Enum):
    """Coarse destination categories used to pick context phrases."""

    CITY = "city"
    HERITAGE = "heritage"
    NATURE = "nature"
    BEACH = "beach"
    WATERFRONT = "waterfront"


WEB_FALLBACK_SOURCE = "web-fallback"
ASSET_SOURCE = "asset"
DEFAULT_SOURCE = "default"


class DestinationLocation(BaseModel):
    """Administrative location of a destination."""

    name: Optional[str] = Field(default=None, description="Localized place name")
    city: Optional[str] = Field(default=None, description="City")
    state: Optional[str] = Field(default=None, description="State or province")
    country: Optional[str] = Field(default=None, description="Country")
    formatted: Optional[str] = Field(default=None, description="Full formatted address")


class DestinationIdentity(BaseModel):
    """Identity fields of a destination used to search for its hero image.

    Attributes:
        name: Display name of the destination (e.g. "Mysuru Palace")
        query: Free-text query used when no name is known
        slug: Stable identifier of the destination record, if any
        category: Category label such as "Royal Heritage" or "Hill Station"
        tags: Free-text tags attached to the destination
        aliases: Alternative names the destination is known by
        location: Administrative location fields
    """

    name: Optional[str] = Field(default=None, description="Destination name")
    query: Optional[str] = Field(default=None, description="Free-text search query")
    slug: Optional[str] = Field(default=None, description="Destination slug")
    category: Optional[str] = Field(default=None, description="Category label")
    tags: List[str] = Field(default_factory=list, description="Free-text tags")
    aliases: List[str] = Field(default_factory=list, description="Known aliases")
    location: DestinationLocation = Field(default_factory=DestinationLocation)

    @field_validator("tags", "aliases", mode="before")
    @classmethod
    def _drop_non_strings(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, list):
            return [item for item in value if isinstance(item, str)]
        return value

    @property
    def display_query(self) -> str:
        """Trimmed name, falling back to the free-text query."""

        for value in (self.name, self.query):
            if value and value.strip():
                return value.strip()
        return ""


class ImageCandidate(BaseModel):
    """A provider photo normalised into the shape the scorer understands."""

    provider: PhotoProviderName
    url: str
    thumbnail_url: Optional[str] = None
    width: Optional[PixelSize] = None
    height: Optional[PixelSize] = None
    descriptive_text: str = Field(
        default="",
        description="Caption, alt text, location and tag text joined with spaces",
    )
    popularity: Popularity = 0
    attribution: str = "Unknown"

    @computed_field(return_type=bool)
    @property
    def is_portrait(self) -> bool:
        return bool(self.width and self.height and self.width < self.height)


def _unique_lower(values: List[str]) -> List[str]:
    seen: List[str] = []
    for value in values:
        if not isinstance(value, str):
            continue
        cleaned = value.strip().lower()
        if cleaned and cleaned not in seen:
            seen.append(cleaned)
    return seen


class KeywordSet(BaseModel):
    """Keyword lists used to reject and rank candidates.

    Entries are lowercased and de-duplicated. Anything listed as negative is
    removed from the other lists so that the sets stay disjoint.
    """

    negative_keywords: List[str] = Field(default_factory=list)
    preferred_keywords: List[str] = Field(default_factory=list)
    extra_tokens: List[str] = Field(default_factory=list)
    positive_keywords: List[str] = Field(default_factory=list)

    def model_post_init(self, __context: Any) -> None:
        self.negative_keywords = _unique_lower(self.negative_keywords)
        banned = set(self.negative_keywords)
        self.preferred_keywords = [kw for kw in _unique_lower(self.preferred_keywords) if kw not in banned]
        self.extra_tokens = [kw for kw in _unique_lower(self.extra_tokens) if kw not in banned]
        self.positive_keywords = [kw for kw in _unique_lower(self.positive_keywords) if kw not in banned]


class SearchOptions(BaseModel):
    """Per-request options forwarded to every provider search."""

    per_page: PerPage = Field(default=15, description="Results per provider call, clamped to 30")
    page: PerPage = 1
    orientation: Optional[str] = "landscape"
    content_filter: Optional[str] = "high"
    collections: Optional[str] = None

    @field_validator("per_page")
    @classmethod
    def _clamp_per_page(cls, value: int) -> int:
        return min(value, 30)


class ResolveOptions(BaseModel):
    """Caller-supplied knobs for a single hero image resolution."""

    query_variants: List[str] = Field(
        default_factory=list,
        description="Explicit search strings tried before generated ones",
    )
    providers: Optional[List[PhotoProviderName]] = Field(
        default=None,
        description="Providers to query; None means every configured provider",
    )
    banned_keywords: List[Keyword] = Field(default_factory=list)
    preferred_keywords: List[Keyword] = Field(default_factory=list)
    default_url: Optional[str] = None
    skip_web_fallback: bool = False
    skip_asset_fallback: bool = False
    assets: Optional[List[str]] = Field(
        default=None,
        description="Overrides the bundled static asset pool",
    )
    web_size: ImageSize = "1600x900"
    search: SearchOptions = Field(default_factory=SearchOptions)


class HeroImageResult(BaseModel):
    """The hero image chosen for a destination."""

    url: str
    thumbnail_url: Optional[str] = None
    source: str = Field(
        description="Provider name, 'web-fallback', 'asset' or 'default'",
    )
    attribution: str = ""
    meta: Dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    @property
    def is_fallback(self) -> bool:
        return self.source in {WEB_FALLBACK_SOURCE, ASSET_SOURCE, DEFAULT_SOURCE}


__all__ = [
    "ASSET_SOURCE",
    "DEFAULT_SOURCE",
    "WEB_FALLBACK_SOURCE",
    "DestinationIdentity",
    "DestinationLocation",
    "HeroImageResult",
    "ImageCandidate",
    "KeywordSet",
    "PhotoProviderName",
    "ResolveOptions",
    "SearchOptions",
    "SemanticBucket",
]
