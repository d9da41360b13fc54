"""Pydantic v2 schemas for the article fetch endpoint.

Field names are snake_case in Python and camelCase on the wire, which is
what the content-import UI reads.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class VideoArticleResponse(_CamelModel):
    """Response for video URLs (no fetch is made)."""

    success: bool = True
    is_video: bool = True
    video_id: str = Field(..., description="Platform video identifier")
    embed_url: str = Field(..., description="Canonical embed player URL")
    url: str
    title: str
    content: str


class PDFArticleResponse(_CamelModel):
    """Response for PDFs detected by URL or declared content type."""

    success: bool = True
    is_pdf: bool = Field(default=True, alias="isPDF")
    pdf_url: str
    url: str
    title: str
    content: str


class SharedArticleResponse(_CamelModel):
    """Response for denylisted share-link hosts (no fetch is made)."""

    success: bool = True
    is_external_share: bool = True
    is_google_share: bool = True
    url: str
    title: str
    content: str


class ArticleResponse(_CamelModel):
    """Response for generic HTML pages."""

    success: bool = True
    title: str
    content: str
    description: str = ""
    author: str = ""
    publication_date: str = Field(default="", description="Free-form, as found on the page")
    url: str


ArticleFetchResponse = (
    VideoArticleResponse | PDFArticleResponse | SharedArticleResponse | ArticleResponse
)
