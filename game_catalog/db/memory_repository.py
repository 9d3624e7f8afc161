"""Implementation of (Game)Repository keeping records in a dictionary (no database required)."""

from dataclasses import replace
from uuid import UUID, uuid4

from game_catalog.core.exceptions import GameAlreadyRegisteredError
from game_catalog.core.models import GameModel


class InMemoryGameStore:
    """Records shared by every repository handed out for the same store. Insertion order = creation order."""

    def __init__(self) -> None:
        self.games: dict[UUID, GameModel] = {}

    def clear(self) -> None:
        self.games.clear()


class InMemoryGameRepository:
    """
    Repository on top of an InMemoryGameStore.

    NOTE none of the methods awaits between reading and writing the store, so each call is atomic on the event loop.
    """

    def __init__(self, store: InMemoryGameStore) -> None:
        self._games = store.games

    async def list_games(self, offset: int, limit: int) -> list[tuple[UUID, GameModel]]:
        page = list(self._games.items())[offset : offset + limit]
        return [(game_id, replace(game)) for game_id, game in page]

    async def get_game(self, game_id: UUID) -> GameModel | None:
        game = self._games.get(game_id)
        return replace(game) if game else None

    async def find_game(self, name: str, producer: str) -> tuple[UUID, GameModel] | None:
        for game_id, game in self._games.items():
            if game.name == name and game.producer == producer:
                return game_id, replace(game)
        return None

    async def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        self._check_unique(game)
        game_id = uuid4()
        self._games[game_id] = replace(game)
        return replace(game), game_id

    async def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        if game_id not in self._games:
            return None
        self._check_unique(game, ignore_id=game_id)
        self._games[game_id] = replace(game)
        return replace(game)

    async def update_price(self, game_id: UUID, price: float) -> GameModel | None:
        game = self._games.get(game_id)
        if game is None:
            return None
        game.price = price
        return replace(game)

    async def delete_game(self, game_id: UUID) -> GameModel | None:
        return self._games.pop(game_id, None)

    async def close(self) -> None:
        """Nothing to release."""

    def _check_unique(self, game: GameModel, ignore_id: UUID | None = None) -> None:
        """Mirror the (name, producer) unique constraint of the SQL schema."""
        for game_id, stored in self._games.items():
            if game_id == ignore_id:
                continue
            if (stored.name, stored.producer) == (game.name, game.producer):
                raise GameAlreadyRegisteredError()
