"""Custom exceptions raised by the service and persistence layers, and handled by the API layer."""


class GameCatalogError(Exception):
    """Top-level exception for anything going wrong inside the game catalog."""


class GameAlreadyRegisteredError(GameCatalogError):
    """A game with the same name already exists for this producer."""

    def __init__(self, message: str = "Este jogo já está cadastrado") -> None:
        super().__init__(message)


class GameNotRegisteredError(GameCatalogError):
    """No game is stored under the requested ID."""

    def __init__(self, message: str = "Este jogo não está cadastrado") -> None:
        super().__init__(message)


class InvalidRequestError(GameCatalogError):
    """Request arguments cannot be interpreted (e.g. page out of range)."""
