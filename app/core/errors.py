"""
Преобразование ошибок домена и хранилища в HTTP-ответы.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.domains.posts.exceptions import BlogPostNotFoundError, BlogPostValidationError

logger = logging.getLogger(__name__)


def _error(status_code: int, detail: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": detail})


def describe_validation_error(exc: RequestValidationError) -> str:
    """Человекочитаемое описание первой ошибки валидации тела запроса"""
    errors = exc.errors()
    if not errors:
        return "Invalid request body"

    error = errors[0]
    field = ".".join(str(part) for part in error.get("loc", ())[1:])

    if error.get("type") == "json_invalid":
        return "Request body is not valid JSON"
    if not field:
        return "Request body must be a JSON object"
    if error.get("type") == "missing":
        return f"Missing `{field}` in request body"
    return f"Invalid `{field}`: {error.get('msg')}"


async def not_found_handler(request: Request, exc: BlogPostNotFoundError) -> JSONResponse:
    logger.info(f"{request.method} {request.url.path}: {exc}")
    return _error(status.HTTP_404_NOT_FOUND, "Blog post not found")


async def domain_validation_handler(request: Request, exc: BlogPostValidationError) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path}: {exc}")
    return _error(status.HTTP_400_BAD_REQUEST, str(exc))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # id в пути, который не является UUID, не может ссылаться на существующий пост
    if any(error.get("loc", ("",))[0] == "path" for error in exc.errors()):
        return _error(status.HTTP_404_NOT_FOUND, "Blog post not found")

    message = describe_validation_error(exc)
    logger.warning(f"{request.method} {request.url.path}: {message}")
    return _error(status.HTTP_400_BAD_REQUEST, message)


async def store_failure_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error(f"Database error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def setup_error_handlers(app: FastAPI) -> None:
    """Регистрация обработчиков ошибок"""
    app.add_exception_handler(BlogPostNotFoundError, not_found_handler)
    app.add_exception_handler(BlogPostValidationError, domain_validation_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, store_failure_handler)
