"""Metadata resolution for extracted articles.

Each field is resolved from an ordered chain of sources; the first
non-empty value wins and later sources are never consulted.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from bs4 import BeautifulSoup

from app.services.extractors.dom import (
    cleaned_clone,
    collapse_spaces,
    get_attr,
    node_text,
)
from app.services.extractors.selectors import (
    AUTHOR_META_SELECTORS,
    AUTHOR_SELECTORS,
    COMMENT_SELECTORS,
    DATE_META_SELECTORS,
    DATE_SELECTORS,
)

DEFAULT_TITLE = "Article"

# "By Jane", "By: Jane", "Author Jane", "Written by Jane"
_AUTHOR_PREFIX = re.compile(r"^(?:written\s+by|author|by)\b:?\s*", re.IGNORECASE)

MIN_AUTHOR_LENGTH = 4
MIN_DATE_TEXT_LENGTH = 6


@dataclass(frozen=True)
class ArticleMetadata:
    title: str
    description: str
    author: str
    publication_date: str


def _meta_content(soup: BeautifulSoup, selector: str) -> str:
    tag = soup.select_one(selector)
    if tag is None:
        return ""
    return get_attr(tag, "content").strip()


def resolve_title(soup: BeautifulSoup) -> str:
    """og:title, then <title>, then the first <h1>, then "Article"."""
    og_title = collapse_spaces(_meta_content(soup, 'meta[property="og:title"]'))
    if og_title:
        return og_title

    title_tag = soup.find("title")
    if title_tag is not None:
        title = collapse_spaces(title_tag.get_text())
        if title:
            return title

    h1 = soup.find("h1")
    if h1 is not None:
        heading = collapse_spaces(h1.get_text())
        if heading:
            return heading

    return DEFAULT_TITLE


def resolve_description(soup: BeautifulSoup) -> str:
    for selector in ('meta[property="og:description"]', 'meta[name="description"]'):
        description = _meta_content(soup, selector)
        if description:
            return description
    return ""


def clean_author_text(text: str) -> str:
    """Strip byline prefixes and collapse whitespace."""
    return collapse_spaces(_AUTHOR_PREFIX.sub("", text.strip()))


def resolve_author(soup: BeautifulSoup) -> str:
    """Merge author meta tags with byline text, deduplicated, in order found.

    Multiple distinct authors are joined with ", ". Bylines inside reader
    comment threads (e.g. ``comment-author``) are ignored.
    """
    authors: list[str] = []

    for selector in AUTHOR_META_SELECTORS:
        for tag in soup.select(selector):
            name = collapse_spaces(get_attr(tag, "content"))
            if name and name not in authors:
                authors.append(name)

    if soup.body is None:
        return ", ".join(authors)

    bylines = cleaned_clone(soup.body, COMMENT_SELECTORS)
    for selector in AUTHOR_SELECTORS:
        for tag in bylines.select(selector):
            name = clean_author_text(tag.get_text())
            if len(name) >= MIN_AUTHOR_LENGTH and name not in authors:
                authors.append(name)

    return ", ".join(authors)


def resolve_publication_date(soup: BeautifulSoup) -> str:
    """Published-time metas, then <time datetime>, then date-class text.

    The value is returned as found on the page (free-form, not parsed).
    """
    for selector in DATE_META_SELECTORS:
        value = _meta_content(soup, selector)
        if value:
            return value

    for time_tag in soup.select("time[datetime]"):
        value = get_attr(time_tag, "datetime").strip()
        if value:
            return value

    for selector in DATE_SELECTORS:
        tag = soup.select_one(selector)
        if tag is None:
            continue
        text = collapse_spaces(node_text(tag))
        if len(text) >= MIN_DATE_TEXT_LENGTH:
            return text

    return ""


def resolve_metadata(soup: BeautifulSoup) -> ArticleMetadata:
    return ArticleMetadata(
        title=resolve_title(soup),
        description=resolve_description(soup),
        author=resolve_author(soup),
        publication_date=resolve_publication_date(soup),
    )
