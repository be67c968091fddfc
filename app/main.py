import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.api.http.health import router as health_router
from app.api.http.posts import router as posts_router
from app.core.db import engine, init_models
from app.core.errors import setup_error_handlers
from app.core.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Подготовка схемы БД при старте и закрытие пула соединений при остановке"""
    setup_logging()
    await init_models(engine)
    logger.info("Blog Posts API started")
    yield
    await engine.dispose()
    logger.info("Blog Posts API stopped")


def create_app() -> FastAPI:
    app = FastAPI(
        title="Blog Posts API",
        description="REST API для постов блога",
        version="1.0.0",
        lifespan=lifespan
    )

    setup_error_handlers(app)

    # Подключаем роутеры
    app.include_router(health_router)
    app.include_router(posts_router)

    return app


app = create_app()
