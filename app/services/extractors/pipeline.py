"""Extraction pipeline orchestrating article extraction from URLs."""

from __future__ import annotations

import logging

from app.core.config import settings
from app.services.classifier import (
    Classification,
    ContentKind,
    classify,
    is_pdf_content_type,
)
from app.services.extractors.base import ContentExtractor, ExtractedArticle
from app.services.extractors.exceptions import UpstreamHTTPError
from app.services.extractors.html_extractor import HTMLExtractor
from app.services.fetcher import Fetcher, FetchPurpose, FetchRequest

logger = logging.getLogger(__name__)

VIDEO_TITLE = "YouTube Video"
VIDEO_CONTENT = "This is a video content. The video player will be displayed below."
PDF_TITLE = "PDF Document"
PDF_CONTENT = (
    "This is a PDF document. You can view it using the embedded PDF viewer below."
)
SHARE_TITLE = "Google Shared Content"
SHARE_CONTENT = (
    "This is shared content from Google. "
    "Please view the content by accessing the original link."
)


class ExtractionPipeline:
    """Orchestrates article extraction from URLs.

    Flow:
    1. Classify the URL (video, PDF and share links return without fetching)
    2. Fetch the page within the extraction budget
    3. Re-route to the PDF shape if the declared content type is a PDF
    4. Run heuristic HTML extraction on everything else

    A new pipeline is created per inbound request; it holds no state
    between calls.
    """

    def __init__(
        self,
        fetcher: Fetcher | None = None,
        extractor: ContentExtractor | None = None,
        timeout_seconds: float | None = None,
    ) -> None:
        self.fetcher = fetcher or Fetcher(max_redirects=settings.fetch_max_redirects)
        self.extractor: ContentExtractor = extractor or HTMLExtractor()
        self.timeout_seconds = (
            timeout_seconds
            if timeout_seconds is not None
            else settings.article_fetch_timeout
        )

    async def extract(self, url: str) -> ExtractedArticle:
        """Extract article content and metadata from URL.

        Args:
            url: Validated absolute http(s) URL

        Returns:
            ExtractedArticle shaped by the content kind

        Raises:
            FetchTimeoutError: If the fetch exceeds the extraction budget
            NetworkError: If the target cannot be reached
            UpstreamHTTPError: If the target answers with a non-2xx status
        """
        classification = classify(url)
        logger.info("Article fetch %s classified as %s", url, classification.kind.value)

        match classification.kind:
            case ContentKind.VIDEO:
                return self._video_article(url, classification)
            case ContentKind.PDF:
                return self._pdf_article(url)
            case ContentKind.EXTERNAL_SHARE:
                return self._share_article(url)

        result = await self.fetcher.fetch(
            FetchRequest(url, FetchPurpose.EXTRACT, self.timeout_seconds)
        )

        if not result.ok:
            raise UpstreamHTTPError(result.status_code, result.reason_phrase, url)

        if is_pdf_content_type(result.content_type):
            logger.info("Content-Type of %s declares a PDF", url)
            return self._pdf_article(url)

        article = self.extractor.extract(result.text, url)
        if result.attempts > 1:
            article.warnings.append("Fetched with fallback headers after HTTP 403")

        logger.info(
            "Extracted %d chars from %s (title=%r)", len(article.content), url, article.title
        )
        return article

    def _video_article(self, url: str, classification: Classification) -> ExtractedArticle:
        return ExtractedArticle(
            source_url=url,
            content_kind=ContentKind.VIDEO,
            title=VIDEO_TITLE,
            content=VIDEO_CONTENT,
            video_id=classification.video_id,
            embed_url=classification.embed_url,
        )

    def _pdf_article(self, url: str) -> ExtractedArticle:
        return ExtractedArticle(
            source_url=url,
            content_kind=ContentKind.PDF,
            title=PDF_TITLE,
            content=PDF_CONTENT,
        )

    def _share_article(self, url: str) -> ExtractedArticle:
        return ExtractedArticle(
            source_url=url,
            content_kind=ContentKind.EXTERNAL_SHARE,
            title=SHARE_TITLE,
            content=SHARE_CONTENT,
        )
