"""TCG API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map TcgApiError → {"error", "message"} responses
    - CORS configured from settings (not hardcoded)
    - Storage initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event
    - uvicorn owns SIGINT/SIGTERM; graceful shutdown bounded by
      settings.shutdown_timeout_seconds
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tcg_api.api.error_handlers import register_error_handlers
from tcg_api.api.routes import decks, game_cards, health, image_cards
from tcg_api.config import Settings, get_settings
from tcg_api.infrastructure.memory_store import init_storage
from tcg_api.infrastructure.observability import (
    RequestLoggingMiddleware, setup_logging,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.logger.level, settings.logger.format)
    init_storage()
    logger.info(f"TCG API started (env={settings.env}, port={settings.port})")
    yield
    logger.info("TCG API shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title="TCG API", version="1.0.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    register_error_handlers(app)

    # Routes — explicit registration
    app.include_router(health.router)
    app.include_router(game_cards.router)
    app.include_router(image_cards.router)
    app.include_router(decks.router)
    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "tcg_api.main:app",
        host=settings.host,
        port=settings.port,
        timeout_keep_alive=settings.idle_timeout_seconds,
        timeout_graceful_shutdown=settings.shutdown_timeout_seconds,
        log_config=None,
    )


if __name__ == "__main__":
    run()
