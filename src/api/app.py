"""FastAPI surface for destination hero image resolution."""
from __future__ import annotations

import os
# Load environment variables from .env file
from dotenv import load_dotenv

# Load .env file before any other imports that might need environment variables
load_dotenv()


from typing import Dict, Any
from fastapi import FastAPI, HTTPException
import logging
import sentry_sdk
from fastapi.middleware.cors import CORSMiddleware

from src.api.dependencies import lifespan, get_hero_service
from src.api.schemas import (
    HeroImageBatchRequest,
    HeroImageBatchResponse,
    HeroImageRequest,
    HeroImageResponse,
)

logger = logging.getLogger(__name__)

if os.getenv("SENTRY_DSN"):  # pragma: no cover - runtime configuration
    sentry_sdk.init(
        dsn=os.getenv("SENTRY_DSN"),
        send_default_pii=False,
        traces_sample_rate=float(os.getenv("SENTRY_TRACES_SAMPLE_RATE", "0.1")),
    )

app = FastAPI(title="Hero Image API", version="0.1.0", lifespan=lifespan)

origins = [
    "http://localhost:3000",
    "http://localhost:5173",
]


app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.post("/images/hero", response_model=HeroImageResponse)
async def resolve_hero_image(payload: HeroImageRequest) -> HeroImageResponse:
    """Pick the hero image for a single destination.

    The resolver expands the destination into search variants, queries every
    configured photo provider, rejects portraits, duplicates and photos whose
    captions contain banned keywords, and returns the best scoring photo. When
    nothing usable is found the response carries a fallback image instead
    (``source`` is ``web-fallback``, ``asset`` or ``default``); that is not an
    error.

    Args:
        payload: Destination identity, resolve options and already used URLs.

    Returns:
        HeroImageResponse with url, thumbnail_url, source, attribution and meta.

    Raises:
        HTTPException: 400 for an unusable identity, 500 for unexpected errors

    Example JSON payload:
        ```json
        {
            "identity": {
                "name": "Mysuru Palace",
                "category": "Royal Heritage",
                "tags": ["palace", "heritage"],
                "location": {"city": "Mysuru", "state": "Karnataka", "country": "India"}
            },
            "exclude_urls": ["https://images.unsplash.com/photo-123"]
        }
        ```
    """

    logger.info(f"Hero image request for {payload.identity.display_query!r}")
    service = get_hero_service()
    try:
        result = await service.resolve(payload.identity, payload.options, payload.exclude_urls)
    except ValueError as exc:
        logger.error(f"Value error during hero image resolution: {str(exc)}")
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except Exception as exc:
        logger.error(f"Unexpected error during hero image resolution: {str(exc)}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    logger.info(f"Hero image resolved from {result.source}")
    return HeroImageResponse.model_validate(result.model_dump())


@app.post("/images/hero/batch", response_model=HeroImageBatchResponse)
async def resolve_hero_images(payload: HeroImageBatchRequest) -> HeroImageBatchResponse:
    """Pick hero images for a list of destinations without repeating a photo."""

    logger.info(f"Hero image batch request for {len(payload.identities)} destinations")
    service = get_hero_service()
    try:
        results = await service.resolve_batch(payload.identities, payload.options, payload.exclude_urls)
    except ValueError as exc:
        logger.error(f"Value error during hero image batch: {str(exc)}")
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except Exception as exc:
        logger.error(f"Unexpected error during hero image batch: {str(exc)}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    return HeroImageBatchResponse(
        results=[HeroImageResponse.model_validate(result.model_dump()) for result in results],
        fallback_count=sum(1 for result in results if result.is_fallback),
    )


@app.get("/health")
async def health_check() -> Dict[str, str]:
    """Simple health endpoint used for readiness probes."""

    return {"status": "healthy", "service": "hero-image-api"}


@app.get("/providers")
async def get_provider_info() -> Dict[str, Any]:
    """Report which photo providers are configured."""
    service = get_hero_service()

    return {
        'providers': [
            {'name': provider.name.value, 'enabled': provider.enabled}
            for provider in service.providers
        ],
        'target_pool_size': service.fetcher.target_pool_size,
        'request_timeout_s': service.fetcher.request_timeout_s,
    }
