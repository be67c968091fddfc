"""
pytest fixtures: тестовая БД на каждый тест, сиды через Faker и HTTP-клиент к приложению
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.config import settings
from app.core.db import create_engine, create_session_factory, drop_models, get_db, init_models
from app.db.repositories.blog_post_repository import BlogPostRepository
from app.main import app
from app.seed import seed_posts

SEED_COUNT = 10


class PostStore:
    """Прямой доступ к хранилищу в обход API, каждый вызов в новой сессии"""

    def __init__(self, session_factory):
        self.session_factory = session_factory

    async def _call(self, method: str, *args):
        async with self.session_factory() as session:
            return await getattr(BlogPostRepository(session), method)(*args)

    async def find_by_id(self, post_id):
        return await self._call("get_by_id", post_id)

    async def find_one(self):
        return await self._call("get_first")

    async def count(self) -> int:
        return await self._call("count")


@pytest_asyncio.fixture
async def db_engine():
    """Чистая схема перед тестом, удаление после, независимо от результата"""
    engine = create_engine(settings.TEST_DATABASE_URL)
    await drop_models(engine)
    await init_models(engine)
    try:
        yield engine
    finally:
        await drop_models(engine)
        await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return create_session_factory(db_engine)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def seeded_posts(session_factory):
    async with session_factory() as session:
        return await seed_posts(session, SEED_COUNT)


@pytest.fixture
def store(session_factory):
    return PostStore(session_factory)


@pytest_asyncio.fixture
async def client(session_factory, seeded_posts):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    try:
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()
