from typing import Any, Dict, List, Optional

import httpx

from src.core.config import ApiSettings
from src.core.schemas import ImageCandidate, PhotoProviderName, SearchOptions
from src.services.base import PhotoProvider, join_text, positive_int
from src.services.unsplash.schemas import UnsplashPhoto, UnsplashSearchResponse


class UnsplashPhotos(PhotoProvider):
    """Adapter for the Unsplash ``/search/photos`` endpoint."""

    name = PhotoProviderName.UNSPLASH
    search_url = "https://api.unsplash.com/search/photos"

    def build_params(self, query: str, options: SearchOptions) -> Dict[str, Any]:
        params: Dict[str, Any] = {
            "query": query,
            "per_page": options.per_page,
            "page": options.page,
            "orientation": options.orientation or "landscape",
            "content_filter": options.content_filter or "high",
        }
        if options.collections:
            params["collections"] = options.collections
        return params

    def build_headers(self) -> Dict[str, str]:
        return {"Authorization": f"Client-ID {self.api_key}", "Accept-Version": "v1"}

    def extract_records(self, payload: Any) -> List[UnsplashPhoto]:
        return UnsplashSearchResponse.model_validate(payload).results

    def normalize(self, record: UnsplashPhoto) -> Optional[ImageCandidate]:
        url = record.urls.regular or record.urls.full
        if not url:
            return None
        location = record.location
        text = join_text(
            record.description,
            record.alt_description,
            location.name if location else None,
            location.city if location else None,
            location.country if location else None,
            *(tag.title for tag in record.tags),
        )
        photographer = record.user.name if record.user else None
        return ImageCandidate(
            provider=self.name,
            url=url,
            thumbnail_url=record.urls.small or record.urls.thumb,
            width=positive_int(record.width),
            height=positive_int(record.height),
            descriptive_text=text,
            popularity=positive_int(record.likes) or 0,
            attribution=f"{photographer} on Unsplash" if photographer else "Unknown",
        )


def create_unsplash_client(settings: ApiSettings, client: httpx.AsyncClient) -> UnsplashPhotos:
    """Instantiate the Unsplash adapter; it stays disabled without an access key."""

    return UnsplashPhotos(client, api_key=settings.unsplash_access_key)
