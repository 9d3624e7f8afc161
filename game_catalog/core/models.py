"""
Boundary layer data model(s).

The service sends/receives these to/from the persistence layer, so the repository never sees API request/response models.
"""

from dataclasses import dataclass

PRICE_DECIMALS = 2


def round_price(price: float) -> float:
    """Prices are kept in cents, whichever endpoint sets them."""
    return round(price, PRICE_DECIMALS)


@dataclass
class GameModel:
    """Transport-safe representation of a catalog entry used between Service and DB layers."""

    name: str
    producer: str
    price: float
