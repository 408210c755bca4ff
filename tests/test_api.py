"""Integration-focused tests for the hero image FastAPI surface."""
from __future__ import annotations

from typing import Any, Dict, List

import pytest
from fastapi.testclient import TestClient

from src.api import app as api_app
from src.core.schemas import HeroImageResult, PhotoProviderName
from src.core.scoring import ExclusionSet


def _make_identity_payload() -> Dict[str, Any]:
    """Return a representative destination identity payload."""

    return {
        "name": "Mysuru Palace",
        "category": "Royal Heritage",
        "tags": ["palace", "heritage"],
        "location": {"city": "Mysuru", "state": "Karnataka", "country": "India"},
    }


class StubProvider:
    def __init__(self, name: PhotoProviderName, enabled: bool) -> None:
        self.name = name
        self.enabled = enabled


class StubFetcher:
    target_pool_size = 10
    request_timeout_s = 12.0


class StubService:
    """Minimal stand-in for ``HeroImageService`` used by the API tests."""

    def __init__(self) -> None:
        self.providers = [
            StubProvider(PhotoProviderName.UNSPLASH, True),
            StubProvider(PhotoProviderName.PEXELS, False),
        ]
        self.fetcher = StubFetcher()
        self.resolve_inputs: List[Dict[str, Any]] = []
        self.batch_inputs: List[Dict[str, Any]] = []
        self.error: Exception | None = None

    async def resolve(self, identity, options=None, exclude_urls=()) -> HeroImageResult:
        if self.error is not None:
            raise self.error
        self.resolve_inputs.append({"identity": identity, "options": options, "exclude_urls": list(exclude_urls)})
        return HeroImageResult(
            url="https://images.unsplash.com/photo-palace",
            thumbnail_url="https://images.unsplash.com/photo-palace?w=400",
            source="unsplash",
            attribution="Asha Rao on Unsplash",
            meta={"score": 19},
        )

    async def resolve_batch(self, identities, options=None, exclude_urls=()) -> List[HeroImageResult]:
        if self.error is not None:
            raise self.error
        exclusion = ExclusionSet(exclude_urls)
        self.batch_inputs.append({"identities": identities, "exclusion": exclusion})
        results = []
        for index, identity in enumerate(identities):
            source = "unsplash" if index == 0 else "asset"
            url = f"https://images.unsplash.com/{identity.name}" if index == 0 else f"/assets/{index}.jpg"
            results.append(HeroImageResult(url=url, source=source))
        return results

    async def close(self) -> None:
        return None


@pytest.fixture
def stub_service(monkeypatch) -> StubService:
    """Provide a stubbed hero image service for API integration tests."""

    service = StubService()
    api_app.get_hero_service.cache_clear()
    monkeypatch.setattr(api_app, "get_hero_service", lambda: service)
    return service


@pytest.fixture
def client(stub_service: StubService) -> TestClient:
    """Yield a TestClient that uses the stubbed service."""

    with TestClient(api_app.app) as test_client:
        yield test_client


def test_health_endpoint(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "service": "hero-image-api"}


def test_providers_endpoint(client: TestClient) -> None:
    response = client.get("/providers")
    assert response.status_code == 200
    data = response.json()
    assert data["providers"] == [
        {"name": "unsplash", "enabled": True},
        {"name": "pexels", "enabled": False},
    ]
    assert data["target_pool_size"] == 10


def test_resolve_hero_image(client: TestClient, stub_service: StubService) -> None:
    payload = {
        "identity": _make_identity_payload(),
        "options": {"query_variants": ["Amba Vilas Palace"], "banned_keywords": ["Drone"], "providers": ["unsplash"]},
        "exclude_urls": ["https://images.unsplash.com/photo-used"],
    }
    response = client.post("/images/hero", json=payload)

    assert response.status_code == 200
    data = response.json()
    assert data["url"] == "https://images.unsplash.com/photo-palace"
    assert data["source"] == "unsplash"
    assert data["attribution"] == "Asha Rao on Unsplash"
    assert data["meta"] == {"score": 19}

    last = stub_service.resolve_inputs[-1]
    assert last["identity"].name == "Mysuru Palace"
    assert last["identity"].location.state == "Karnataka"
    assert last["options"].query_variants == ["Amba Vilas Palace"]
    assert last["options"].banned_keywords == ["drone"]
    assert last["options"].providers == [PhotoProviderName.UNSPLASH]
    assert last["exclude_urls"] == ["https://images.unsplash.com/photo-used"]


def test_resolve_rejects_unknown_provider(client: TestClient) -> None:
    payload = {"identity": _make_identity_payload(), "options": {"providers": ["flickr"]}}
    response = client.post("/images/hero", json=payload)
    assert response.status_code == 422


def test_resolve_value_error_maps_to_400(client: TestClient, stub_service: StubService) -> None:
    stub_service.error = ValueError("Destination identity needs a name or query")
    response = client.post("/images/hero", json={"identity": {}})
    assert response.status_code == 400
    assert "name or query" in response.json()["detail"]


def test_resolve_unexpected_error_maps_to_500(client: TestClient, stub_service: StubService) -> None:
    stub_service.error = RuntimeError("boom")
    response = client.post("/images/hero", json={"identity": _make_identity_payload()})
    assert response.status_code == 500


def test_resolve_batch(client: TestClient, stub_service: StubService) -> None:
    payload = {
        "identities": [{"name": "Hampi"}, {"name": "Badami"}, {"name": "Aihole"}],
        "exclude_urls": ["/assets/9.jpg"],
    }
    response = client.post("/images/hero/batch", json=payload)

    assert response.status_code == 200
    data = response.json()
    assert [item["source"] for item in data["results"]] == ["unsplash", "asset", "asset"]
    assert data["results"][0]["url"] == "https://images.unsplash.com/Hampi"
    assert data["fallback_count"] == 2
    assert "/assets/9.jpg" in stub_service.batch_inputs[-1]["exclusion"]


def test_resolve_batch_requires_identities(client: TestClient) -> None:
    response = client.post("/images/hero/batch", json={"identities": []})
    assert response.status_code == 422
