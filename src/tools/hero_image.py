"""LangChain tool that lets planning agents fetch destination hero images."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from langchain_core.tools import StructuredTool
from pydantic import BaseModel, Field

from src.core.schemas import DestinationIdentity, DestinationLocation, ResolveOptions
from src.core.scoring import ExclusionSet
from src.pipelines.hero_image import HeroImageResolver


class HeroImageToolInput(BaseModel):
    """Arguments accepted by the hero image tool."""

    name: str = Field(description="Destination name, e.g. 'Mysuru Palace'")
    category: Optional[str] = Field(default=None, description="Category label, e.g. 'Royal Heritage'")
    tags: List[str] = Field(default_factory=list, description="Descriptive tags such as 'palace' or 'beach'")
    city: Optional[str] = Field(default=None, description="City the destination is in")
    state: Optional[str] = Field(default=None, description="State or province")
    country: Optional[str] = Field(default=None, description="Country")
    exclude_urls: List[str] = Field(
        default_factory=list,
        description="Image URLs already used for other destinations",
    )


def create_hero_image_tool(
    resolver: HeroImageResolver,
    exclusion: Optional[ExclusionSet] = None,
) -> StructuredTool:
    """Return a LangChain tool resolving one landscape hero image per call.

    When ``exclusion`` is given every call of the tool shares it, so an agent
    illustrating several destinations never receives the same photo twice.
    """

    async def _arun(**kwargs: Any) -> Dict[str, Any]:
        data = HeroImageToolInput(**kwargs)
        shared = exclusion if exclusion is not None else ExclusionSet()
        shared.update(data.exclude_urls)
        identity = DestinationIdentity(
            name=data.name,
            category=data.category,
            tags=data.tags,
            location=DestinationLocation(city=data.city, state=data.state, country=data.country),
        )
        result = await resolver.resolve(identity, ResolveOptions(), shared)
        return result.model_dump()

    return StructuredTool.from_function(
        coroutine=_arun,
        name="find_hero_image",
        description="Find a representative landscape photo for a travel destination.",
        args_schema=HeroImageToolInput,
    )
