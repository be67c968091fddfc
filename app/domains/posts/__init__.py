from app.domains.posts.entities import Author, BlogPost
from app.domains.posts.exceptions import BlogPostError, BlogPostNotFoundError, BlogPostValidationError
from app.domains.posts.schemas import AuthorSchema, BlogPostCreate, BlogPostUpdate, BlogPostResponse

# BlogPostService импортируется напрямую из app.domains.posts.services,
# иначе возникает цикл с app.db.repositories
__all__ = [
    "Author", "BlogPost",
    "BlogPostError", "BlogPostNotFoundError", "BlogPostValidationError",
    "AuthorSchema", "BlogPostCreate", "BlogPostUpdate", "BlogPostResponse",
]
