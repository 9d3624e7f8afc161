"""FastAPI dependencies: one GameService per request, released when the request is done."""

from typing import AsyncGenerator

from fastapi import Depends

from game_catalog.core.config import Settings, get_settings
from game_catalog.db.database import SessionLocal
from game_catalog.db.memory_repository import InMemoryGameRepository, InMemoryGameStore
from game_catalog.db.sql_repository import SQLGameRepository
from game_catalog.services.game_service import CatalogGameService, GameService

# Only used with `storage = "memory"`, lives as long as the process
memory_store = InMemoryGameStore()


def build_game_service(settings: Settings) -> CatalogGameService:
    """Service on top of the configured storage. The caller is responsible for closing it."""
    if settings.storage == "memory":
        return CatalogGameService(InMemoryGameRepository(memory_store))
    return CatalogGameService(SQLGameRepository(SessionLocal()))


async def get_game_service(
    settings: Settings = Depends(get_settings),
) -> AsyncGenerator[GameService, None]:
    async with build_game_service(settings) as service:
        yield service
