from src.api.hero_service import HeroImageService
from src.core.config import ApiSettings
from fastapi import FastAPI
from contextlib import asynccontextmanager
from typing import AsyncGenerator
from functools import lru_cache


@lru_cache(maxsize=1)
def get_hero_service() -> HeroImageService:
    settings = ApiSettings.from_env()
    return HeroImageService(settings)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    try:
        yield
    finally:
        service = get_hero_service()
        await service.close()
