"""Business operations on the game catalog, independent of the HTTP transport."""

import logging
from types import TracebackType
from typing import Protocol, Self
from uuid import UUID

from game_catalog.api.models import GameInput, GameView
from game_catalog.core.exceptions import (
    GameAlreadyRegisteredError,
    GameNotRegisteredError,
    InvalidRequestError,
)
from game_catalog.core.models import round_price
from game_catalog.db.repository import GameRepository

logger = logging.getLogger(__name__)

MIN_PAGE = 1
# Offsets past this overflow the database integer type
MAX_PAGE = 2**31 - 1
MIN_PAGE_SIZE = 1
MAX_PAGE_SIZE = 50


class GameService(Protocol):
    """
    Contract the API layer depends on.

    A service owns a connection to the data store: use it as an async context manager (or call close()) so the
    connection is released once the service is no longer needed.
    """

    async def list_games(self, page: int, page_size: int) -> list[GameView]:
        """Requested page of games. Empty when the page lies beyond the stored games."""
        ...

    async def get_by_id(self, game_id: UUID) -> GameView | None:
        """The game, or None when the ID is unknown."""
        ...

    async def insert(self, game: GameInput) -> GameView:
        """Store a new game. Raises GameAlreadyRegisteredError if the producer already has a game with that name."""
        ...

    async def replace(self, game_id: UUID, game: GameInput) -> None:
        """Overwrite name, producer and price. Raises GameNotRegisteredError for an unknown ID."""
        ...

    async def update_price(self, game_id: UUID, price: float) -> None:
        """Overwrite only the price (rounded to cents). Raises GameNotRegisteredError for an unknown ID."""
        ...

    async def remove(self, game_id: UUID) -> None:
        """Delete permanently. Raises GameNotRegisteredError for an unknown ID."""
        ...

    async def close(self) -> None: ...

    async def __aenter__(self) -> Self: ...

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None: ...


class CatalogGameService:
    """GameService backed by a GameRepository (SQL or in-memory)."""

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository

    # -- Resource lifecycle --
    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def close(self) -> None:
        await self.repo.close()

    # -- API routes logic ---
    async def list_games(self, page: int, page_size: int) -> list[GameView]:
        if not MIN_PAGE <= page <= MAX_PAGE:
            raise InvalidRequestError(f"Page must be between {MIN_PAGE} and {MAX_PAGE}, got {page=}.")
        if not MIN_PAGE_SIZE <= page_size <= MAX_PAGE_SIZE:
            raise InvalidRequestError(
                f"Page size must be between {MIN_PAGE_SIZE} and {MAX_PAGE_SIZE}, got {page_size=}."
            )

        stored = await self.repo.list_games(offset=(page - 1) * page_size, limit=page_size)
        return [GameView.from_model(game_id, model) for game_id, model in stored]

    async def get_by_id(self, game_id: UUID) -> GameView | None:
        model = await self.repo.get_game(game_id)
        if model is None:
            return None
        return GameView.from_model(game_id, model)

    async def insert(self, game: GameInput) -> GameView:
        if await self.repo.find_game(game.name, game.producer) is not None:
            logger.warning(f"Rejected duplicate game {game.name!r} by {game.producer!r}")
            raise GameAlreadyRegisteredError()

        stored_game, game_id = await self.repo.create_game(game.to_model())
        logger.info(f"Registered game {game_id} ({stored_game.name!r} by {stored_game.producer!r})")
        return GameView.from_model(game_id, stored_game)

    async def replace(self, game_id: UUID, game: GameInput) -> None:
        if await self.repo.get_game(game_id) is None:
            logger.warning(f"Cannot update unknown game {game_id}")
            raise GameNotRegisteredError()

        # The new (name, producer) pair may not belong to another game
        same_pair = await self.repo.find_game(game.name, game.producer)
        if same_pair is not None and same_pair[0] != game_id:
            logger.warning(f"Rejected update of {game_id}: {game.name!r} by {game.producer!r} already exists")
            raise GameAlreadyRegisteredError()

        if await self.repo.update_game(game_id, game.to_model()) is None:
            raise GameNotRegisteredError()
        logger.info(f"Updated game {game_id}")

    async def update_price(self, game_id: UUID, price: float) -> None:
        price = round_price(price)
        if await self.repo.update_price(game_id, price) is None:
            logger.warning(f"Cannot update price of unknown game {game_id}")
            raise GameNotRegisteredError()
        logger.info(f"Updated price of game {game_id} to {price}")

    async def remove(self, game_id: UUID) -> None:
        if await self.repo.delete_game(game_id) is None:
            logger.warning(f"Cannot delete unknown game {game_id}")
            raise GameNotRegisteredError()
        logger.info(f"Deleted game {game_id}")
