"""Protocol repository (implemented with SQLAlchemy, and as a plain in-memory store for tests/demo runs)"""

from typing import Protocol
from uuid import UUID

from game_catalog.core.models import GameModel


class GameRepository(Protocol):
    """Persistence layer orchestration"""

    async def list_games(self, offset: int, limit: int) -> list[tuple[UUID, GameModel]]:
        """Get at most `limit` games after skipping `offset`, oldest first."""
        ...

    async def get_game(self, game_id: UUID) -> GameModel | None:
        """Get game by ID, if record exists."""
        ...

    async def find_game(self, name: str, producer: str) -> tuple[UUID, GameModel] | None:
        """Look up a game by its (name, producer) pair."""
        ...

    async def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        """Store new game and return the stored data + newly created game ID."""
        ...

    async def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        """Overwrite all fields of an existing record."""
        ...

    async def update_price(self, game_id: UUID, price: float) -> GameModel | None:
        """Overwrite only the price of an existing record."""
        ...

    async def delete_game(self, game_id: UUID) -> GameModel | None:
        """Remove a game's record."""
        ...

    async def close(self) -> None:
        """Release the underlying connection/session."""
        ...
