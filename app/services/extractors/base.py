"""Base classes for content extraction."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from app.services.classifier import ContentKind


@dataclass(frozen=True)
class ExtractionConfig:
    """Thresholds for candidate selection."""

    min_content_length: int = 500  # Below this a candidate is not usable
    good_enough_length: int = 1000  # Stop trying selectors once exceeded
    min_paragraph_length: int = 20
    min_list_item_length: int = 10


@dataclass(frozen=True)
class ContentCandidate:
    """One selector's cleaned text, scored by its character length."""

    selector: str
    text: str
    structured: bool  # False when the flattened-text fallback was used

    @property
    def score(self) -> int:
        return len(self.text)


@dataclass
class ExtractedArticle:
    """Article content and metadata returned by the extraction path."""

    source_url: str
    content_kind: ContentKind = ContentKind.ARTICLE
    title: str = ""
    content: str = ""
    description: str = ""
    author: str = ""
    publication_date: str = ""
    video_id: str | None = None
    embed_url: str | None = None
    warnings: list[str] = field(default_factory=list)


class ContentExtractor(Protocol):
    """Protocol defining interface for content extractors."""

    def extract(self, html: str, url: str) -> ExtractedArticle:
        """Extract content and metadata from an HTML string.

        Args:
            html: Raw HTML content
            url: Source URL

        Returns:
            ExtractedArticle; never raises for malformed or sparse HTML
        """
        ...
