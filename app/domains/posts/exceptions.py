import uuid


class BlogPostError(Exception):
    """Базовая ошибка домена постов"""


class BlogPostNotFoundError(BlogPostError):
    def __init__(self, post_id: uuid.UUID | str):
        self.post_id = post_id
        super().__init__(f"Blog post {post_id} not found")


class BlogPostValidationError(BlogPostError):
    """Некорректные данные запроса"""
