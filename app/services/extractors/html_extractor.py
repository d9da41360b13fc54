"""Heuristic article extraction from HTML using scored candidate regions."""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup
from bs4.element import Tag

from app.services.extractors.base import (
    ContentCandidate,
    ExtractedArticle,
    ExtractionConfig,
)
from app.services.extractors.dom import cleaned_clone, node_text, parse_document
from app.services.extractors.metadata import resolve_metadata
from app.services.extractors.normalizer import normalize_text
from app.services.extractors.selectors import (
    BODY_FALLBACK_SELECTORS,
    CONTENT_SELECTORS,
    STRUCTURED_TAGS,
)

logger = logging.getLogger(__name__)

_HEADING_TAGS = frozenset({"h1", "h2", "h3", "h4", "h5", "h6"})


class HTMLExtractor:
    """Extract readable content from HTML by trying prioritized regions.

    Each selector in ``content_selectors`` yields at most one candidate: the
    first matching region, cloned and stripped of denylisted chrome. The
    longest candidate wins, except that the first candidate longer than
    ``good_enough_length`` ends the search immediately ("first good
    enough", not "globally best"). When no candidate reaches
    ``min_content_length`` the whole body is used instead.

    All state is local to one ``extract`` call.
    """

    def __init__(
        self,
        config: ExtractionConfig | None = None,
        content_selectors: tuple[str, ...] = CONTENT_SELECTORS,
    ) -> None:
        self.config = config or ExtractionConfig()
        self.content_selectors = content_selectors

    def extract(self, html: str, url: str) -> ExtractedArticle:
        """Extract normalized content and metadata from HTML.

        Args:
            html: Raw HTML content
            url: Source URL, echoed into the result

        Returns:
            ExtractedArticle; fields without a source are empty strings
        """
        soup = parse_document(html)
        metadata = resolve_metadata(soup)
        content = normalize_text(self.extract_content(soup))

        return ExtractedArticle(
            source_url=url,
            title=metadata.title,
            content=content,
            description=metadata.description,
            author=metadata.author,
            publication_date=metadata.publication_date,
        )

    def extract_content(self, soup: BeautifulSoup) -> str:
        """Return the raw (un-normalized) text of the winning region."""
        best = self.select_candidate(soup)
        if best is not None and best.score >= self.config.min_content_length:
            logger.debug(
                "Using candidate %r (%d chars, structured=%s)",
                best.selector,
                best.score,
                best.structured,
            )
            return best.text

        logger.debug(
            "No candidate reached %d chars, using body text",
            self.config.min_content_length,
        )
        return self.body_text(soup)

    def select_candidate(self, soup: BeautifulSoup) -> ContentCandidate | None:
        """Walk the selector list and return the best candidate seen."""
        best: ContentCandidate | None = None

        for selector in self.content_selectors:
            region = soup.select_one(selector)
            if region is None:
                continue

            candidate = self.build_candidate(selector, region)
            if best is None or candidate.score > best.score:
                best = candidate

            if candidate.score > self.config.good_enough_length:
                break

        return best

    def build_candidate(self, selector: str, region: Tag) -> ContentCandidate:
        clone = cleaned_clone(region)
        text = self._structured_text(clone)
        if len(text) >= self.config.min_content_length:
            return ContentCandidate(selector=selector, text=text, structured=True)
        return ContentCandidate(selector=selector, text=node_text(clone), structured=False)

    def body_text(self, soup: BeautifulSoup) -> str:
        """Whole-body fallback, preferring a main/article/content region."""
        body = soup.body
        if body is None:
            return ""

        clone = cleaned_clone(body)
        region = clone.select_one(", ".join(BODY_FALLBACK_SELECTORS))
        return node_text(region if region is not None else clone)

    def _structured_text(self, node: Tag) -> str:
        """Rebuild text from headings, paragraphs and list items in document order."""
        parts: list[str] = []

        for element in node.find_all(STRUCTURED_TAGS):
            text = node_text(element)
            if element.name in _HEADING_TAGS:
                if text:
                    parts.append(f"\n\n{text}\n\n")
            elif element.name == "p":
                if len(text) > self.config.min_paragraph_length:
                    parts.append(f"{text}\n\n")
            elif len(text) > self.config.min_list_item_length:
                parts.append(f"• {text}\n")

        return "".join(parts)
