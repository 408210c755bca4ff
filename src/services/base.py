"""Common adapter interface for stock photo providers."""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import httpx

from src.core.schemas import ImageCandidate, PhotoProviderName, SearchOptions

logger = logging.getLogger(__name__)


def positive_int(value: Any) -> Optional[int]:
    """Coerce a provider dimension or count into a positive ``int`` or ``None``."""

    try:
        number = int(value)
    except (TypeError, ValueError):
        return None
    return number if number > 0 else None


def join_text(*fragments: Any) -> str:
    """Join the non-empty string fragments of a photo record with spaces."""

    return " ".join(
        fragment.strip() for fragment in fragments if isinstance(fragment, str) and fragment.strip()
    )


class PhotoProvider(ABC):
    """Thin async adapter around one stock photo search endpoint.

    Subclasses only describe the request and map the raw payload into
    ``ImageCandidate`` objects. The HTTP client is injected so that the same
    connection pool (or a fake transport in tests) is shared by every adapter.
    """

    name: PhotoProviderName
    search_url: str

    def __init__(self, client: httpx.AsyncClient, api_key: Optional[str] = None) -> None:
        self._client = client
        self.api_key = api_key

    @property
    def enabled(self) -> bool:
        """Providers without credentials are skipped silently."""

        return bool(self.api_key)

    @abstractmethod
    def build_params(self, query: str, options: SearchOptions) -> Dict[str, Any]:
        """Return the query string parameters for a search request."""

    @abstractmethod
    def build_headers(self) -> Dict[str, str]:
        """Return the authentication headers for a search request."""

    @abstractmethod
    def extract_records(self, payload: Any) -> List[Any]:
        """Return the raw photo records contained in a decoded response."""

    @abstractmethod
    def normalize(self, record: Any) -> Optional[ImageCandidate]:
        """Map one raw record into an ``ImageCandidate`` (``None`` to drop it)."""

    async def _aget(self, params: Dict[str, Any]) -> Any:
        """Execute an authenticated GET request and return the parsed JSON."""

        response = await self._client.get(self.search_url, params=params, headers=self.build_headers())
        response.raise_for_status()
        return response.json()

    async def search(self, query: str, options: Optional[SearchOptions] = None) -> List[ImageCandidate]:
        """Search the provider and return normalised candidates.

        Raises ``httpx.HTTPError`` on transport failures and non-2xx responses
        and ``ValueError`` on payloads that are not valid JSON or do not have
        the expected shape.
        """

        if not self.enabled:
            return []
        options = options or SearchOptions()
        payload = await self._aget(self.build_params(query, options))
        candidates: List[ImageCandidate] = []
        for record in self.extract_records(payload):
            candidate = self.normalize(record)
            if candidate is not None:
                candidates.append(candidate)
        logger.debug("%s returned %d candidates for %r", self.name.value, len(candidates), query)
        return candidates

    def __repr__(self) -> str:
        state = "enabled" if self.enabled else "disabled"
        return f"{type(self).__name__}({state})"
