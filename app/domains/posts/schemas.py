from pydantic import BaseModel, Field, field_validator
from typing import Optional
import uuid
from datetime import datetime

from app.domains.posts.entities import Author, BlogPost


class AuthorSchema(BaseModel):
    """Автор в теле запроса"""
    firstName: str = Field(..., min_length=1)
    lastName: str = Field(..., min_length=1)

    def to_entity(self) -> Author:
        return Author(first_name=self.firstName, last_name=self.lastName)


class BlogPostCreate(BaseModel):
    """Схема для создания поста"""
    title: str = Field(..., min_length=1)
    content: str
    author: AuthorSchema

    @field_validator('title')
    @classmethod
    def validate_title(cls, v):
        if not v.strip():
            raise ValueError('Title cannot be empty')
        return v


class BlogPostUpdate(BaseModel):
    """Схема для частичного обновления поста"""
    id: Optional[uuid.UUID] = None
    title: Optional[str] = Field(None, min_length=1)
    content: Optional[str] = None

    @field_validator('title')
    @classmethod
    def validate_title(cls, v):
        if v is not None and not v.strip():
            raise ValueError('Title cannot be empty')
        return v

    def changes(self) -> dict:
        """Только явно переданные изменяемые поля"""
        return self.model_dump(
            include=set(BlogPost.UPDATABLE_FIELDS),
            exclude_unset=True,
            exclude_none=True
        )


class BlogPostResponse(BaseModel):
    """Публичное представление поста"""
    id: uuid.UUID
    title: str
    content: str
    author: str
    created: datetime

    @classmethod
    def from_entity(cls, post: BlogPost) -> "BlogPostResponse":
        return cls(
            id=post.id,
            title=post.title,
            content=post.content,
            author=post.author.full_name,
            created=post.created
        )
