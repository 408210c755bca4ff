from typing import Any, Dict, List, Optional

import httpx

from src.core.config import ApiSettings
from src.core.schemas import ImageCandidate, PhotoProviderName, SearchOptions
from src.services.base import PhotoProvider, join_text, positive_int
from src.services.pexels.schemas import PexelsPhoto, PexelsSearchResponse


class PexelsPhotos(PhotoProvider):
    """Adapter for the Pexels ``/v1/search`` endpoint."""

    name = PhotoProviderName.PEXELS
    search_url = "https://api.pexels.com/v1/search"

    def build_params(self, query: str, options: SearchOptions) -> Dict[str, Any]:
        return {
            "query": query,
            "per_page": options.per_page,
            "page": options.page,
            "orientation": options.orientation or "landscape",
        }

    def build_headers(self) -> Dict[str, str]:
        return {"Authorization": str(self.api_key)}

    def extract_records(self, payload: Any) -> List[PexelsPhoto]:
        return PexelsSearchResponse.model_validate(payload).photos

    def normalize(self, record: PexelsPhoto) -> Optional[ImageCandidate]:
        url = record.src.landscape or record.src.original
        if not url:
            return None
        # Pexels exposes no like counts; "liked" only reflects the key owner.
        return ImageCandidate(
            provider=self.name,
            url=url,
            thumbnail_url=record.src.small or record.src.tiny,
            width=positive_int(record.width),
            height=positive_int(record.height),
            descriptive_text=join_text(record.alt),
            popularity=1 if record.liked else 0,
            attribution=f"{record.photographer} on Pexels" if record.photographer else "Unknown",
        )


def create_pexels_client(settings: ApiSettings, client: httpx.AsyncClient) -> PexelsPhotos:
    """Instantiate the Pexels adapter; it stays disabled without an API key."""

    return PexelsPhotos(client, api_key=settings.pexels_api_key)
