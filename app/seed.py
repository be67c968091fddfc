"""
Заполнение базы тестовыми постами.

    python -m app.seed --count 10
"""

import argparse
import asyncio
import logging
from typing import List

from faker import Faker
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import SessionLocal, engine, init_models
from app.core.logging import setup_logging
from app.db.repositories.blog_post_repository import BlogPostRepository
from app.domains.posts.entities import Author, BlogPost

logger = logging.getLogger(__name__)

fake = Faker()


def generate_post_data() -> dict:
    """Случайный пост в формате тела POST /posts"""
    return {
        "title": fake.sentence(),
        "content": fake.paragraph(),
        "author": {
            "firstName": fake.first_name(),
            "lastName": fake.last_name()
        }
    }


def generate_posts(count: int = 10) -> List[BlogPost]:
    posts = []
    for _ in range(count):
        data = generate_post_data()
        posts.append(BlogPost.create_post(
            title=data["title"],
            content=data["content"],
            author=Author.from_document(data["author"])
        ))
    return posts


async def seed_posts(session: AsyncSession, count: int = 10) -> List[BlogPost]:
    """Массовая вставка сгенерированных постов"""
    logger.info(f"Seeding {count} blog posts")
    return await BlogPostRepository(session).create_many(generate_posts(count))


async def main(count: int) -> None:
    await init_models(engine)
    async with SessionLocal() as session:
        posts = await seed_posts(session, count)
    await engine.dispose()
    logger.info(f"Inserted {len(posts)} blog posts")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed blog posts with fake data")
    parser.add_argument("--count", type=int, default=10)
    args = parser.parse_args()

    setup_logging()
    asyncio.run(main(args.count))
