"""Pexels photo search integration.

Public API:
    - PexelsPhotos: Adapter mapping Pexels search results into image candidates
    - create_pexels_client: Factory building the adapter from project settings
    - PexelsPhoto: Pydantic schema of a raw Pexels photo record
"""
from src.services.pexels.client import PexelsPhotos, create_pexels_client
from src.services.pexels.schemas import PexelsPhoto, PexelsSearchResponse

__all__ = [
    "PexelsPhotos",
    "create_pexels_client",
    "PexelsPhoto",
    "PexelsSearchResponse",
]
