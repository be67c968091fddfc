from app.db.repositories.blog_post_repository import BlogPostRepository

__all__ = [
    "BlogPostRepository",
]
