from typing import Optional, List, Iterable
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, delete, func
import uuid

from app.db.models.blog_post import BlogPost as BlogPostModel
from app.domains.posts.entities import Author, BlogPost


class BlogPostRepository:
    """Репозиторий для работы с постами блога"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, post: BlogPost) -> BlogPost:
        """Создание нового поста"""
        db_post = self._to_model(post)

        self.session.add(db_post)
        await self.session.commit()
        await self.session.refresh(db_post)
        return self._to_domain(db_post)

    async def create_many(self, posts: Iterable[BlogPost]) -> List[BlogPost]:
        """Массовая вставка постов"""
        db_posts = [self._to_model(post) for post in posts]

        self.session.add_all(db_posts)
        await self.session.commit()
        for db_post in db_posts:
            await self.session.refresh(db_post)
        return [self._to_domain(db_post) for db_post in db_posts]

    async def get_all(self) -> List[BlogPost]:
        """Получение всех постов в порядке создания"""
        result = await self.session.execute(
            select(BlogPostModel).order_by(BlogPostModel.created_at, BlogPostModel.id)
        )
        return [self._to_domain(db_post) for db_post in result.scalars().all()]

    async def get_by_id(self, post_id: uuid.UUID) -> Optional[BlogPost]:
        """Получение поста по id"""
        result = await self.session.execute(
            select(BlogPostModel).where(BlogPostModel.id == post_id)
        )
        db_post = result.scalar_one_or_none()
        return self._to_domain(db_post) if db_post else None

    async def get_first(self) -> Optional[BlogPost]:
        """Любой (первый по времени создания) пост"""
        result = await self.session.execute(
            select(BlogPostModel).order_by(BlogPostModel.created_at, BlogPostModel.id).limit(1)
        )
        db_post = result.scalar_one_or_none()
        return self._to_domain(db_post) if db_post else None

    async def update_by_id(self, post_id: uuid.UUID, fields: dict) -> bool:
        """Частичное обновление: меняются только переданные поля"""
        if not fields:
            return await self.exists(post_id)

        stmt = (
            update(BlogPostModel)
            .where(BlogPostModel.id == post_id)
            .values(**fields)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount > 0

    async def delete_by_id(self, post_id: uuid.UUID) -> bool:
        """Удаление поста"""
        stmt = delete(BlogPostModel).where(BlogPostModel.id == post_id)
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount > 0

    async def exists(self, post_id: uuid.UUID) -> bool:
        result = await self.session.execute(
            select(func.count(BlogPostModel.id)).where(BlogPostModel.id == post_id)
        )
        return result.scalar() > 0

    async def count(self) -> int:
        """Общее количество постов"""
        result = await self.session.execute(select(func.count(BlogPostModel.id)))
        return result.scalar()

    def _to_model(self, post: BlogPost) -> BlogPostModel:
        return BlogPostModel(
            id=post.id or uuid.uuid4(),
            title=post.title,
            content=post.content,
            author=post.author.to_document()
        )

    def _to_domain(self, db_post: BlogPostModel) -> BlogPost:
        """Преобразование модели БД в доменную сущность"""
        return BlogPost(
            id=db_post.id,
            title=db_post.title,
            content=db_post.content,
            author=Author.from_document(db_post.author),
            created=db_post.created_at
        )
