import logging
from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
import uuid

from app.db.repositories.blog_post_repository import BlogPostRepository
from app.domains.posts.entities import BlogPost
from app.domains.posts.exceptions import BlogPostNotFoundError, BlogPostValidationError
from app.domains.posts.schemas import BlogPostCreate, BlogPostUpdate

logger = logging.getLogger(__name__)


class BlogPostService:
    """Сервис для работы с постами блога"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.post_repository = BlogPostRepository(session)

    async def list_posts(self) -> List[BlogPost]:
        """Все посты"""
        return await self.post_repository.get_all()

    async def get_post(self, post_id: uuid.UUID) -> BlogPost:
        """Получение поста по id"""
        post = await self.post_repository.get_by_id(post_id)

        if not post:
            raise BlogPostNotFoundError(post_id)

        return post

    async def create_post(self, post_data: BlogPostCreate) -> BlogPost:
        """Создание нового поста"""
        post = BlogPost.create_post(
            title=post_data.title,
            content=post_data.content,
            author=post_data.author.to_entity()
        )

        created_post = await self.post_repository.create(post)
        logger.info(f"Created blog post {created_post.id}")
        return created_post

    async def update_post(self, post_id: uuid.UUID, update_data: BlogPostUpdate) -> None:
        """Частичное обновление title/content"""
        if update_data.id is not None and update_data.id != post_id:
            raise BlogPostValidationError(
                f"Request path id ({post_id}) and request body id ({update_data.id}) must match"
            )

        changes = update_data.changes()
        updated = await self.post_repository.update_by_id(post_id, changes)

        if not updated:
            raise BlogPostNotFoundError(post_id)

        logger.info(f"Updated blog post {post_id}: {sorted(changes)}")

    async def delete_post(self, post_id: uuid.UUID) -> None:
        """Удаление поста"""
        deleted = await self.post_repository.delete_by_id(post_id)

        if not deleted:
            raise BlogPostNotFoundError(post_id)

        logger.info(f"Deleted blog post {post_id}")
