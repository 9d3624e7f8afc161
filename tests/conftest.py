"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

import os
from typing import AsyncGenerator, Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import StaticPool
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

# Setup an in-memory SQLite database for testing
DATABASE_URL = "sqlite+aiosqlite:///:memory:"

# The app-wide engine is built on import, so point it at a throwaway database first
os.environ["GAME_CATALOG_DATABASE_URL"] = DATABASE_URL
os.environ["GAME_CATALOG_STORAGE"] = "sql"

from game_catalog.api import dependencies  # noqa: E402
from game_catalog.api.dependencies import get_game_service  # noqa: E402
from game_catalog.core.config import Settings, get_settings  # noqa: E402
from game_catalog.db.memory_repository import InMemoryGameRepository, InMemoryGameStore  # noqa: E402
from game_catalog.db.schema import Base  # noqa: E402
from game_catalog.main import create_app  # noqa: E402
from game_catalog.services.game_service import CatalogGameService  # noqa: E402


@pytest.fixture
async def db_session_repo() -> AsyncGenerator[AsyncSession, None]:
    """Connection to a fresh test database. A new engine per test keeps repository unit tests independent of each other."""
    engine = create_async_engine(DATABASE_URL, poolclass=StaticPool)
    async with engine.begin() as connection:
        await connection.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(bind=engine, expire_on_commit=False)
    try:
        async with session_factory() as db:
            yield db
    finally:
        async with engine.begin() as connection:
            await connection.run_sync(Base.metadata.drop_all)
        await engine.dispose()


@pytest.fixture
def memory_store() -> Generator[InMemoryGameStore, None, None]:
    """Ensures to clear the store between tests"""
    store = InMemoryGameStore()
    try:
        yield store
    finally:
        store.clear()


@pytest.fixture
def memory_repository(memory_store: InMemoryGameStore) -> InMemoryGameRepository:
    return InMemoryGameRepository(memory_store)


@pytest.fixture
def client(memory_store: InMemoryGameStore) -> TestClient:
    """HTTP client on a fresh app, with every request served by an in-memory service."""
    app = create_app()

    async def override_game_service() -> AsyncGenerator[CatalogGameService, None]:
        async with CatalogGameService(InMemoryGameRepository(memory_store)) as service:
            yield service

    app.dependency_overrides[get_game_service] = override_game_service
    return TestClient(app)


@pytest.fixture
def sql_client() -> Generator[TestClient, None, None]:
    """
    HTTP client on the app exactly as deployed: no overrides, one SQL-backed service per request.

    Entering the client runs the lifespan, which creates the tables. Leaving it disposes the engine,
    and with it the in-memory database, so every test starts from an empty catalog.
    """
    with TestClient(create_app()) as client:
        yield client


@pytest.fixture
def memory_storage_client() -> Generator[TestClient, None, None]:
    """HTTP client on an app configured with `storage = "memory"` (services built by the real dependency)."""
    app = create_app()
    app.dependency_overrides[get_settings] = lambda: Settings(storage="memory")
    dependencies.memory_store.clear()
    try:
        with TestClient(app) as client:
            yield client
    finally:
        dependencies.memory_store.clear()
