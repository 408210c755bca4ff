"""External stock photo integrations for hero image resolution.

This package provides one adapter per photo provider. Every adapter implements
``PhotoProvider``: it builds a search request, and maps the provider specific
JSON into the common ``ImageCandidate`` shape, so nothing downstream needs to
know which provider a photo came from.

- Unsplash: ``/search/photos`` with likes, tags and location metadata
- Pexels: ``/v1/search`` with alt text and photographer credits

Each service module exports:
    - create_*_client: Factory to create the adapter from settings and a shared HTTP client
    - Raw response schemas: Pydantic models used to validate provider payloads

Example Usage:
    >>> import httpx
    >>> from src.services import create_photo_providers
    >>> from src.core.config import ApiSettings
    >>>
    >>> settings = ApiSettings.from_env()
    >>> providers = create_photo_providers(settings, httpx.AsyncClient(timeout=12.0))
"""
from typing import List

import httpx

from src.core.config import ApiSettings
from src.services.base import PhotoProvider

# Unsplash search
from src.services.unsplash import (
    UnsplashPhotos,
    create_unsplash_client,
    UnsplashPhoto,
)

# Pexels search
from src.services.pexels import (
    PexelsPhotos,
    create_pexels_client,
    PexelsPhoto,
)


def create_photo_providers(settings: ApiSettings, client: httpx.AsyncClient) -> List[PhotoProvider]:
    """Build every known adapter in priority order, sharing one HTTP client."""

    return [
        create_unsplash_client(settings, client),
        create_pexels_client(settings, client),
    ]


__all__ = [
    "PhotoProvider",
    "create_photo_providers",
    # Unsplash
    "UnsplashPhotos",
    "create_unsplash_client",
    "UnsplashPhoto",
    # Pexels
    "PexelsPhotos",
    "create_pexels_client",
    "PexelsPhoto",
]
