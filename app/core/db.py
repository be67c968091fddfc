from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from app.config import settings
from app.db.base import Base
from app.db import models  # noqa: F401  регистрация моделей в metadata


def create_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """Асинхронный движок для заданного URL базы данных"""
    return create_async_engine(database_url, future=True, echo=echo)


def create_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=bind, class_=AsyncSession, expire_on_commit=False)


engine = create_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)

SessionLocal = create_session_factory(engine)


async def init_models(bind: AsyncEngine = engine) -> None:
    """Создание таблиц для всех моделей"""
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_models(bind: AsyncEngine = engine) -> None:
    """Удаление всех таблиц"""
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


# Функция для dependency injection в FastAPI
async def get_db():
    async with SessionLocal() as session:
        yield session
