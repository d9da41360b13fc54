"""Article extraction REST endpoint."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from app.schemas.article import (
    ArticleFetchResponse,
    ArticleResponse,
    PDFArticleResponse,
    SharedArticleResponse,
    VideoArticleResponse,
)
from app.schemas.common import ErrorResponse
from app.services.classifier import ContentKind
from app.services.extractors import ExtractedArticle, ExtractionPipeline, UpstreamHTTPError
from app.services.fetcher import FetchTimeoutError, NetworkError
from app.services.urls import validate_target_url

logger = logging.getLogger(__name__)

router = APIRouter(tags=["article"])


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _to_response(article: ExtractedArticle) -> ArticleFetchResponse:
    """Shape an ExtractedArticle by its content kind."""
    match article.content_kind:
        case ContentKind.VIDEO:
            return VideoArticleResponse(
                video_id=article.video_id or "",
                embed_url=article.embed_url or "",
                url=article.source_url,
                title=article.title,
                content=article.content,
            )
        case ContentKind.PDF:
            return PDFArticleResponse(
                pdf_url=article.source_url,
                url=article.source_url,
                title=article.title,
                content=article.content,
            )
        case ContentKind.EXTERNAL_SHARE:
            return SharedArticleResponse(
                url=article.source_url,
                title=article.title,
                content=article.content,
            )
        case _:
            return ArticleResponse(
                title=article.title,
                content=article.content,
                description=article.description,
                author=article.author,
                publication_date=article.publication_date,
                url=article.source_url,
            )


@router.get(
    "/article/fetch",
    response_model=None,
    responses={
        400: {"model": ErrorResponse, "description": "Missing or invalid URL"},
        408: {"model": ErrorResponse, "description": "Upstream fetch timed out"},
        500: {"model": ErrorResponse, "description": "Unexpected failure"},
    },
)
async def fetch_article(
    url: str | None = Query(default=None, description="Article, video or PDF URL"),
) -> JSONResponse:
    """Fetch a URL and return its readable content and metadata.

    Videos, PDFs and share links are recognized from the URL alone and
    answered without fetching. Other pages are fetched (10s budget) and run
    through heuristic extraction.

    Non-2xx upstream statuses are passed through with an error body.
    """
    target_url = validate_target_url(url)
    pipeline = ExtractionPipeline()

    try:
        article = await pipeline.extract(target_url)
    except FetchTimeoutError:
        return _error_response(408, "Request timeout")
    except UpstreamHTTPError as e:
        logger.warning("Upstream returned %d for %s", e.status_code, target_url)
        # Only error statuses can be passed through with a body
        status_code = e.status_code if e.status_code >= 400 else 502
        return _error_response(status_code, f"Failed to fetch article: {e.reason}")
    except NetworkError as e:
        logger.warning("Fetch article failed for %s: %s", target_url, e)
        return _error_response(500, "Failed to fetch article content")
    except Exception:
        logger.exception("Fetch article error for %s", target_url)
        return _error_response(500, "Failed to fetch article content")

    for warning in article.warnings:
        logger.warning("Article fetch %s: %s", target_url, warning)

    return JSONResponse(content=_to_response(article).model_dump(by_alias=True))
