"""Async engine and session factory"""

from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine

from game_catalog.core.config import get_settings
from game_catalog.db.schema import Base

settings = get_settings()
engine = create_async_engine(settings.database_url, echo=settings.echo_sql)
SessionLocal = async_sessionmaker(bind=engine, expire_on_commit=False)


async def init_db(bind: AsyncEngine = engine) -> None:
    """Ensure all tables are created"""
    async with bind.begin() as connection:
        await connection.run_sync(Base.metadata.create_all)
