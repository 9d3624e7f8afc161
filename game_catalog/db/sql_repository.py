"""Implementation of (Game)Repository using SQLAlchemy (asyncio extension)"""

import logging
from uuid import UUID, uuid4

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from game_catalog.core.exceptions import GameAlreadyRegisteredError
from game_catalog.core.models import GameModel
from game_catalog.db.schema import DBGame

logger = logging.getLogger(__name__)


class SQLGameRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: AsyncSession) -> None:
        self.db = db_session

    async def list_games(self, offset: int, limit: int) -> list[tuple[UUID, GameModel]]:
        """Get at most `limit` games after skipping `offset`, oldest first."""
        query = (
            select(DBGame)
            .order_by(DBGame.seq)
            .offset(offset)
            .limit(limit)
        )
        games_db = (await self.db.scalars(query)).all()
        return [(game_db.id, self._to_model(game_db)) for game_db in games_db]

    async def get_game(self, game_id: UUID) -> GameModel | None:
        """Get game by ID, if record exists."""
        game_db = await self._fetch_game(game_id)
        if game_db:
            return self._to_model(game_db)
        return None

    async def find_game(self, name: str, producer: str) -> tuple[UUID, GameModel] | None:
        """Look up a game by its (name, producer) pair."""
        query = select(DBGame).where(DBGame.name == name, DBGame.producer == producer)
        game_db = await self.db.scalar(query)
        if game_db:
            return game_db.id, self._to_model(game_db)
        return None

    async def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        """Store new game and return the stored data + newly created game ID."""

        new_id = uuid4()
        game_db = DBGame(
            id=new_id,
            name=game.name,
            producer=game.producer,
            price=game.price,
        )
        self.db.add(game_db)
        await self._commit()
        await self.db.refresh(game_db)
        return self._to_model(game_db), new_id

    async def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        """Overwrite all fields of an existing record."""
        game_db = await self._fetch_game(game_id)
        if not game_db:
            return None
        game_db.name = game.name
        game_db.producer = game.producer
        game_db.price = game.price
        await self._commit()
        await self.db.refresh(game_db)
        return self._to_model(game_db)

    async def update_price(self, game_id: UUID, price: float) -> GameModel | None:
        """Overwrite only the price of an existing record."""
        game_db = await self._fetch_game(game_id)
        if not game_db:
            return None
        game_db.price = price
        await self._commit()
        await self.db.refresh(game_db)
        return self._to_model(game_db)

    async def delete_game(self, game_id: UUID) -> GameModel | None:
        """Remove a game's record."""
        game_db = await self._fetch_game(game_id)
        if not game_db:
            return None
        game_model = self._to_model(game_db)
        await self.db.delete(game_db)
        await self._commit()
        return game_model

    async def close(self) -> None:
        await self.db.close()

    async def _fetch_game(self, game_id: UUID) -> DBGame | None:
        query = select(DBGame).where(DBGame.id == game_id)
        return await self.db.scalar(query)

    async def _commit(self) -> None:
        """Commit the pending changes, or roll back and re-raise.

        A violated (name, producer) constraint surfaces as GameAlreadyRegisteredError,
        which covers a concurrent insert sneaking in between the service's lookup and this commit.
        """
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning(f"Unique constraint violated on commit: {e.orig}")
            raise GameAlreadyRegisteredError() from e
        except Exception as e:
            logger.error(f"Transaction failed: {e}", exc_info=True)
            await self.db.rollback()
            raise

    def _to_model(self, game_db: DBGame) -> GameModel:
        """Convert SQLAlchemy model to data transfer model."""
        return GameModel(
            name=game_db.name,
            producer=game_db.producer,
            price=game_db.price,
        )
