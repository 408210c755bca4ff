from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PexelsSource(BaseModel):
    """Pre-rendered size variants of a Pexels photo."""
    original: Optional[str] = None
    large2x: Optional[str] = None
    large: Optional[str] = None
    medium: Optional[str] = None
    small: Optional[str] = None
    landscape: Optional[str] = None
    portrait: Optional[str] = None
    tiny: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class PexelsPhoto(BaseModel):
    """Single photo record from the ``/v1/search`` endpoint."""
    id: Optional[int] = None
    width: Optional[int] = None
    height: Optional[int] = None
    url: Optional[str] = Field(default=None, description="Pexels page of the photo")
    alt: Optional[str] = None
    photographer: Optional[str] = None
    photographer_url: Optional[str] = None
    liked: Optional[bool] = False
    src: PexelsSource = Field(default_factory=PexelsSource)

    model_config = ConfigDict(extra="ignore")


class PexelsSearchResponse(BaseModel):
    """Envelope returned by the ``/v1/search`` endpoint."""
    page: Optional[int] = None
    per_page: Optional[int] = None
    total_results: Optional[int] = None
    photos: List[PexelsPhoto] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")
