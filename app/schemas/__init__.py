"""Pydantic schemas package."""

from app.schemas.article import (  # noqa: F401
    ArticleFetchResponse,
    ArticleResponse,
    PDFArticleResponse,
    SharedArticleResponse,
    VideoArticleResponse,
)
from app.schemas.common import ErrorResponse, HealthResponse, MessageResponse  # noqa: F401
