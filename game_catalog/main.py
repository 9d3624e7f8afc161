"""FastAPI application: routers, request validation handling and startup/shutdown of the database."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from game_catalog.api.routes import router as games_router
from game_catalog.core.config import get_settings
from game_catalog.db.database import engine, init_db

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler()],
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: create tables when games are stored in the database
    if settings.storage == "sql":
        await init_db()
        logger.info(f"Database ready at {engine.url.render_as_string(hide_password=True)}")
    yield
    # Shutdown: release pooled connections
    await engine.dispose()


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed or out-of-range request parameters are a client error (400), rejected before any service call."""
    logger.info(f"Rejected request {request.method} {request.url.path}: {len(exc.errors())} validation error(s)")
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


def create_app() -> FastAPI:
    app = FastAPI(
        title="API Controle de Jogos",
        description="Catálogo de jogos: listagem paginada, consulta, cadastro, atualização e remoção",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.include_router(games_router)

    @app.get("/")
    async def root():
        return {"message": "API Controle de Jogos", "status": "ok"}

    @app.get("/health")
    async def health():
        return {"status": "healthy"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
