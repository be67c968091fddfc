import uuid

import pytest

from app.db.repositories.blog_post_repository import BlogPostRepository
from app.domains.posts.entities import Author, BlogPost
from app.seed import generate_posts


def make_post(title="Title", content="Content", first_name="Ada", last_name="Lovelace") -> BlogPost:
    return BlogPost.create_post(title=title, content=content, author=Author(first_name, last_name))


class TestBlogPostRepository:

    @pytest.mark.asyncio
    async def test_create_assigns_id_and_created(self, db_session):
        repo = BlogPostRepository(db_session)

        post = await repo.create(make_post())

        assert isinstance(post.id, uuid.UUID)
        assert post.created is not None
        assert post.author == Author("Ada", "Lovelace")

    @pytest.mark.asyncio
    async def test_create_many_and_count(self, db_session):
        repo = BlogPostRepository(db_session)

        posts = await repo.create_many(generate_posts(5))

        assert len(posts) == 5
        assert len({post.id for post in posts}) == 5
        assert await repo.count() == 5
        assert len(await repo.get_all()) == 5

    @pytest.mark.asyncio
    async def test_get_by_id_round_trip(self, db_session):
        repo = BlogPostRepository(db_session)
        created = await repo.create(make_post(title="Hello", content="World"))

        found = await repo.get_by_id(created.id)

        assert found.title == "Hello"
        assert found.content == "World"
        assert found.author.first_name == "Ada"
        assert found.author.last_name == "Lovelace"

    @pytest.mark.asyncio
    async def test_get_by_id_missing_returns_none(self, db_session):
        repo = BlogPostRepository(db_session)

        assert await repo.get_by_id(uuid.uuid4()) is None

    @pytest.mark.asyncio
    async def test_get_first(self, db_session):
        repo = BlogPostRepository(db_session)
        assert await repo.get_first() is None

        created = await repo.create(make_post())

        assert (await repo.get_first()).id == created.id

    @pytest.mark.asyncio
    async def test_update_by_id_applies_only_given_fields(self, session_factory):
        async with session_factory() as session:
            created = await BlogPostRepository(session).create(make_post(title="Old", content="Body"))

        async with session_factory() as session:
            updated = await BlogPostRepository(session).update_by_id(created.id, {"title": "New"})
        assert updated is True

        async with session_factory() as session:
            post = await BlogPostRepository(session).get_by_id(created.id)
        assert post.title == "New"
        assert post.content == "Body"
        assert post.author == created.author

    @pytest.mark.asyncio
    async def test_update_by_id_missing(self, db_session):
        repo = BlogPostRepository(db_session)

        assert await repo.update_by_id(uuid.uuid4(), {"title": "New"}) is False
        assert await repo.update_by_id(uuid.uuid4(), {}) is False

    @pytest.mark.asyncio
    async def test_delete_by_id(self, db_session):
        repo = BlogPostRepository(db_session)
        created = await repo.create(make_post())

        assert await repo.delete_by_id(created.id) is True
        assert await repo.get_by_id(created.id) is None
        assert await repo.delete_by_id(created.id) is False
        assert await repo.count() == 0
