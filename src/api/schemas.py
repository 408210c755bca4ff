from typing import List, Optional
from pydantic import BaseModel, Field
from src.core.schemas import DestinationIdentity, HeroImageResult, ResolveOptions


class HeroImageRequest(BaseModel):
    """Request payload used to resolve the hero image of one destination."""

    identity: DestinationIdentity = Field(
        ..., description="Name, category, tags and location of the destination."
    )
    options: ResolveOptions = Field(
        default_factory=ResolveOptions,
        description="Explicit query variants, provider selection, keyword overrides and fallbacks.",
    )
    exclude_urls: List[str] = Field(
        default_factory=list,
        description="Image URLs already used by other destinations.",
    )


class HeroImageBatchRequest(BaseModel):
    """Request payload used to resolve hero images for a list of destinations."""

    identities: List[DestinationIdentity] = Field(
        ..., min_length=1, description="Destinations in the order they are listed."
    )
    options: ResolveOptions = Field(default_factory=ResolveOptions)
    exclude_urls: List[str] = Field(
        default_factory=list,
        description="Image URLs already used outside this batch.",
    )


class HeroImageResponse(HeroImageResult):
    """Hero image returned by the resolve endpoints."""
    pass


class HeroImageBatchResponse(BaseModel):
    """Hero images for a batch, in request order, without duplicates where avoidable."""

    results: List[HeroImageResponse] = Field(default_factory=list)
    fallback_count: Optional[int] = Field(
        default=None, description="How many destinations ended on a fallback image"
    )
