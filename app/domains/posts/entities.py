import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Author:
    """Автор поста"""
    first_name: str
    last_name: str

    @property
    def full_name(self) -> str:
        """Имя автора в том виде, в котором его отдает API"""
        return f"{self.first_name} {self.last_name}"

    @classmethod
    def from_document(cls, data: dict) -> "Author":
        return cls(first_name=data["firstName"], last_name=data["lastName"])

    def to_document(self) -> dict:
        return {"firstName": self.first_name, "lastName": self.last_name}


class BlogPost:
    """Сущность поста блога"""

    # Поля, которые можно менять через частичное обновление
    UPDATABLE_FIELDS = ("title", "content")

    def __init__(
        self,
        id: Optional[uuid.UUID],
        title: str,
        content: str,
        author: Author,
        created: Optional[datetime] = None
    ):
        self.id = id
        self.title = title
        self.content = content
        self.author = author
        self.created = created

    @classmethod
    def create_post(cls, title: str, content: str, author: Author) -> "BlogPost":
        """Новый пост; id и время создания назначает хранилище"""
        return cls(id=None, title=title, content=content, author=author)

    def __eq__(self, other) -> bool:
        if not isinstance(other, BlogPost):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"BlogPost(id={self.id}, title={self.title})"
