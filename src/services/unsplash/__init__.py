"""Unsplash photo search integration.

Public API:
    - UnsplashPhotos: Adapter mapping Unsplash search results into image candidates
    - create_unsplash_client: Factory building the adapter from project settings
    - UnsplashPhoto: Pydantic schema of a raw Unsplash photo record
"""
from src.services.unsplash.client import UnsplashPhotos, create_unsplash_client
from src.services.unsplash.schemas import UnsplashPhoto, UnsplashSearchResponse

__all__ = [
    "UnsplashPhotos",
    "create_unsplash_client",
    "UnsplashPhoto",
    "UnsplashSearchResponse",
]
