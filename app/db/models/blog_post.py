from sqlalchemy import Column, Text, JSON

from app.db.base import BaseModel


class BlogPost(BaseModel):
    __tablename__ = "blog_posts"

    title = Column(Text, nullable=False)
    content = Column(Text, nullable=False)
    # {"firstName": ..., "lastName": ...}
    author = Column(JSON, nullable=False)
