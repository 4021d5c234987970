"""Process bootstrap: logging, the FastAPI application, and the uvicorn server."""

import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.api.connections import ConnectionManager
from src.api.routes import router
from src.core.config import Settings
from src.core.exceptions import GameError
from src.duel.match import Match
from src.services.match_service import MatchService

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()

    app = FastAPI(
        title="Duel",
        description="Two-player capture game on a 5x5 board",
        version="0.1.0",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    match = Match.new_match(layout=settings.starting_layout)
    app.state.settings = settings
    app.state.match_service = MatchService(match)
    app.state.connections = ConnectionManager()
    app.include_router(router)

    @app.exception_handler(GameError)
    async def game_error_handler(request: Request, exc: GameError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    logger.info("Match %s created with layout %s", match.match_id, settings.starting_layout)
    return app


def run() -> None:
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
