"""HTTP endpoints of the game catalog (version 1)."""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response
from fastapi.responses import PlainTextResponse

from game_catalog.api.dependencies import get_game_service
from game_catalog.api.models import GameInput, GameView
from game_catalog.core.exceptions import GameAlreadyRegisteredError, GameNotRegisteredError
from game_catalog.services.game_service import MAX_PAGE, MAX_PAGE_SIZE, MIN_PAGE, MIN_PAGE_SIZE, GameService

router = APIRouter(prefix="/api/V1/jogos", tags=["jogos"])

DUPLICATE_GAME_MESSAGE = "Já existe um jogo com este nome para esta produtora"
UNKNOWN_GAME_ON_UPDATE_MESSAGE = "Não existe esse jogo"
UNKNOWN_GAME_ON_DELETE_MESSAGE = "Não existe este jogo"


@router.get(
    "",
    response_model=list[GameView],
    responses={204: {"description": "Nenhum jogo nesta página"}},
)
async def list_games(
    pagina: int = Query(MIN_PAGE, ge=MIN_PAGE, le=MAX_PAGE, description="Página consultada. Mínimo 1"),
    quantidade: int = Query(
        5,
        ge=MIN_PAGE_SIZE,
        le=MAX_PAGE_SIZE,
        description="Quantidade de registros por página. Mínimo 1 e máximo 50",
    ),
    service: GameService = Depends(get_game_service),
):
    """
    Buscar todos os jogos de forma paginada.

    Não é possível retornar os jogos sem paginação.
    """
    games = await service.list_games(pagina, quantidade)
    if not games:
        return Response(status_code=204)
    return games


@router.get(
    "/{game_id:uuid}",
    response_model=GameView,
    responses={204: {"description": "Jogo não encontrado"}},
)
async def get_game(game_id: UUID, service: GameService = Depends(get_game_service)):
    """Buscar jogo pelo seu Id."""
    game = await service.get_by_id(game_id)
    if game is None:
        return Response(status_code=204)
    return game


@router.post(
    "",
    response_model=GameView,
    responses={422: {"description": DUPLICATE_GAME_MESSAGE}},
)
async def insert_game(game: GameInput, service: GameService = Depends(get_game_service)):
    """Inserir novo jogo."""
    try:
        return await service.insert(game)
    except GameAlreadyRegisteredError:
        return PlainTextResponse(DUPLICATE_GAME_MESSAGE, status_code=422)


@router.put(
    "/{game_id:uuid}",
    responses={
        404: {"description": UNKNOWN_GAME_ON_UPDATE_MESSAGE},
        422: {"description": DUPLICATE_GAME_MESSAGE},
    },
)
async def replace_game(game_id: UUID, game: GameInput, service: GameService = Depends(get_game_service)):
    """Atualizar jogo (todos os campos)."""
    try:
        await service.replace(game_id, game)
    except GameNotRegisteredError:
        return PlainTextResponse(UNKNOWN_GAME_ON_UPDATE_MESSAGE, status_code=404)
    except GameAlreadyRegisteredError:
        return PlainTextResponse(DUPLICATE_GAME_MESSAGE, status_code=422)
    return Response(status_code=200)


# Path segment mirrors the public contract: /{id}/preco;{preco}
@router.patch(
    "/{game_id:uuid}/preco;{preco:float}",
    responses={404: {"description": UNKNOWN_GAME_ON_UPDATE_MESSAGE}},
)
async def update_game_price(game_id: UUID, preco: float, service: GameService = Depends(get_game_service)):
    """Atualizar o preço do jogo."""
    try:
        await service.update_price(game_id, preco)
    except GameNotRegisteredError:
        return PlainTextResponse(UNKNOWN_GAME_ON_UPDATE_MESSAGE, status_code=404)
    return Response(status_code=200)


@router.delete(
    "/{game_id:uuid}",
    responses={404: {"description": UNKNOWN_GAME_ON_DELETE_MESSAGE}},
)
async def delete_game(game_id: UUID, service: GameService = Depends(get_game_service)):
    """Apagar jogo."""
    try:
        await service.remove(game_id)
    except GameNotRegisteredError:
        return PlainTextResponse(UNKNOWN_GAME_ON_DELETE_MESSAGE, status_code=404)
    return Response(status_code=200)
