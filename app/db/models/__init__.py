from app.db.models.blog_post import BlogPost

__all__ = [
    "BlogPost",
]
