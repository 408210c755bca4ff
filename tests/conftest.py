"""Pytest configuration for the hero image project."""
from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

import pytest

# Ensure the project root is on sys.path so that import src works under pytest.
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.core.schemas import ImageCandidate, PhotoProviderName, SearchOptions  # noqa: E402
from src.services.base import PhotoProvider  # noqa: E402

Responder = Callable[[str], List[ImageCandidate]]


class FakeProvider(PhotoProvider):
    """Scripted provider: answers each query from a callable or a dict."""

    search_url = "https://photos.invalid/search"

    def __init__(
        self,
        name: PhotoProviderName,
        responses: Union[Responder, Dict[str, List[ImageCandidate]], None] = None,
        *,
        api_key: Optional[str] = "test-key",
        error: Optional[BaseException] = None,
        delay: float = 0.0,
    ) -> None:
        super().__init__(client=None, api_key=api_key)  # type: ignore[arg-type]
        self.name = name
        self.responses = responses or {}
        self.error = error
        self.delay = delay
        self.calls: List[str] = []

    def build_params(self, query: str, options: SearchOptions) -> Dict[str, Any]:
        return {"query": query}

    def build_headers(self) -> Dict[str, str]:
        return {}

    def extract_records(self, payload: Any) -> List[Any]:
        return list(payload)

    def normalize(self, record: Any) -> Optional[ImageCandidate]:
        return record

    async def search(self, query: str, options: Optional[SearchOptions] = None) -> List[ImageCandidate]:
        if not self.enabled:
            return []
        self.calls.append(query)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        if callable(self.responses):
            return list(self.responses(query))
        return list(self.responses.get(query, []))


def make_candidate(
    url: str,
    text: str = "",
    *,
    provider: PhotoProviderName = PhotoProviderName.UNSPLASH,
    width: Optional[int] = 1600,
    height: Optional[int] = 900,
    popularity: int = 0,
) -> ImageCandidate:
    return ImageCandidate(
        provider=provider,
        url=url,
        thumbnail_url=f"{url}?w=400",
        width=width,
        height=height,
        descriptive_text=text,
        popularity=popularity,
        attribution=f"Tester on {provider.value.title()}",
    )


@pytest.fixture
def candidate_factory() -> Callable[..., ImageCandidate]:
    return make_candidate


@pytest.fixture
def provider_factory() -> Callable[..., FakeProvider]:
    return FakeProvider
