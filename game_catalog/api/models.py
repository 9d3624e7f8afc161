"""Requests and Response models"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from game_catalog.core.models import GameModel, round_price


# --- REQUEST MODELS ---
class GameInput(BaseModel):
    """Body of the create / full update requests."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=3, max_length=100, description="Nome do jogo")
    producer: str = Field(min_length=3, max_length=100, description="Nome da produtora")
    price: float = Field(ge=1, le=1000, description="Preço do jogo")

    @field_validator("price")
    @classmethod
    def price_in_cents(cls, value: float) -> float:
        return round_price(value)

    def to_model(self) -> GameModel:
        return GameModel(name=self.name, producer=self.producer, price=self.price)


# --- RESPONSE MODELS ---
class GameView(BaseModel):
    id: UUID
    name: str
    producer: str
    price: float

    @classmethod
    def from_model(cls, game_id: UUID, model: GameModel) -> "GameView":
        return cls(id=game_id, name=model.name, producer=model.producer, price=model.price)
