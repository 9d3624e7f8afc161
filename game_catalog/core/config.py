"""Application settings, read from environment variables (prefix GAME_CATALOG_) or a .env file."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="GAME_CATALOG_", env_file=".env")

    database_url: str = "sqlite+aiosqlite:///./jogos.db"
    storage: Literal["sql", "memory"] = "sql"
    echo_sql: bool = False
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 8000


@lru_cache()
def get_settings() -> Settings:
    return Settings()
