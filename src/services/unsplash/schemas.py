from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class UnsplashUrls(BaseModel):
    """Size variants of an Unsplash photo."""
    raw: Optional[str] = None
    full: Optional[str] = None
    regular: Optional[str] = None
    small: Optional[str] = None
    thumb: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class UnsplashUser(BaseModel):
    """Photographer credited for an Unsplash photo."""
    name: Optional[str] = None
    username: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class UnsplashLocation(BaseModel):
    """Where an Unsplash photo was taken, when the photographer said so."""
    name: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class UnsplashTag(BaseModel):
    """Search tag attached to an Unsplash photo."""
    title: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class UnsplashPhoto(BaseModel):
    """Single photo record from the ``/search/photos`` endpoint."""
    id: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    description: Optional[str] = None
    alt_description: Optional[str] = None
    likes: Optional[int] = Field(default=0, description="Number of likes on Unsplash")
    urls: UnsplashUrls = Field(default_factory=UnsplashUrls)
    user: Optional[UnsplashUser] = None
    location: Optional[UnsplashLocation] = None
    tags: List[UnsplashTag] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")


class UnsplashSearchResponse(BaseModel):
    """Envelope returned by the ``/search/photos`` endpoint."""
    total: Optional[int] = None
    total_pages: Optional[int] = None
    results: List[UnsplashPhoto] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")
