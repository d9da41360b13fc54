"""Article extraction module for the /article/fetch endpoint.

This module provides a heuristic, selector-driven extractor:
1. Candidate regions are tried in priority order (site-specific first)
2. Each candidate is cloned and stripped of navigation, ads and share widgets
3. The first "good enough" candidate, or the longest usable one, wins
4. Whole-body text is the fallback when no candidate is usable

The ExtractionPipeline wraps this with URL classification and fetching.

Usage:
    from app.services.extractors import ExtractionPipeline

    pipeline = ExtractionPipeline()
    article = await pipeline.extract("https://example.com/story")
    print(article.title, article.content)
"""

from app.services.extractors.base import (
    ContentCandidate,
    ContentExtractor,
    ExtractedArticle,
    ExtractionConfig,
)
from app.services.extractors.exceptions import ExtractionError, UpstreamHTTPError
from app.services.extractors.html_extractor import HTMLExtractor
from app.services.extractors.metadata import ArticleMetadata, resolve_metadata
from app.services.extractors.normalizer import normalize_text
from app.services.extractors.pipeline import ExtractionPipeline

__all__ = [
    # Base classes
    "ContentCandidate",
    "ContentExtractor",
    "ExtractedArticle",
    "ExtractionConfig",
    # Extractors
    "HTMLExtractor",
    "ExtractionPipeline",
    # Metadata and text
    "ArticleMetadata",
    "resolve_metadata",
    "normalize_text",
    # Exceptions
    "ExtractionError",
    "UpstreamHTTPError",
]
