from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List
import uuid

from app.core.db import get_db
from app.domains.posts.schemas import BlogPostCreate, BlogPostUpdate, BlogPostResponse
from app.domains.posts.services import BlogPostService

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get("", response_model=List[BlogPostResponse])
async def list_posts(db: AsyncSession = Depends(get_db)):
    """Получение всех постов"""
    post_service = BlogPostService(db)

    posts = await post_service.list_posts()

    return [BlogPostResponse.from_entity(post) for post in posts]


@router.get("/{post_id}", response_model=BlogPostResponse)
async def get_post(
    post_id: uuid.UUID,
    db: AsyncSession = Depends(get_db)
):
    """Получение поста по id"""
    post_service = BlogPostService(db)

    post = await post_service.get_post(post_id)

    return BlogPostResponse.from_entity(post)


@router.post("", response_model=BlogPostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    post_data: BlogPostCreate,
    db: AsyncSession = Depends(get_db)
):
    """Создание нового поста"""
    post_service = BlogPostService(db)

    post = await post_service.create_post(post_data)

    return BlogPostResponse.from_entity(post)


@router.put("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_post(
    post_id: uuid.UUID,
    update_data: BlogPostUpdate,
    db: AsyncSession = Depends(get_db)
):
    """Частичное обновление поста"""
    post_service = BlogPostService(db)

    await post_service.update_post(post_id, update_data)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: uuid.UUID,
    db: AsyncSession = Depends(get_db)
):
    """Удаление поста"""
    post_service = BlogPostService(db)

    await post_service.delete_post(post_id)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
