"""Thin helpers over BeautifulSoup used by the extractors.

Every helper that removes nodes works on a clone, so the parsed document
handed in by the caller is never mutated.
"""

from __future__ import annotations

import copy
import re
from collections.abc import Iterable

from bs4 import BeautifulSoup
from bs4.element import Tag

from app.services.extractors.selectors import (
    COMMENT_SELECTORS,
    UNWANTED_ATTRIBUTE_SELECTORS,
    UNWANTED_SELECTORS,
)

_WHITESPACE_RUN = re.compile(r"\s+")

DEFAULT_DENYLIST: tuple[str, ...] = (
    UNWANTED_SELECTORS + UNWANTED_ATTRIBUTE_SELECTORS + COMMENT_SELECTORS
)


def parse_document(html: str) -> BeautifulSoup:
    """Parse HTML with lxml; malformed markup is repaired, never rejected."""
    return BeautifulSoup(html or "", "lxml")


def get_attr(tag: Tag, name: str) -> str:
    """Return an attribute as a string (multi-valued attributes are joined)."""
    value = tag.get(name)
    if value is None:
        return ""
    if isinstance(value, list):
        return " ".join(value)
    return str(value)


def node_text(node: Tag) -> str:
    return node.get_text().strip()


def collapse_spaces(text: str) -> str:
    return _WHITESPACE_RUN.sub(" ", text).strip()


def cleaned_clone(node: Tag, denylist: Iterable[str] = DEFAULT_DENYLIST) -> Tag:
    """Clone ``node`` and drop every descendant matching the denylist."""
    clone = copy.copy(node)
    for selector in denylist:
        # extract() tolerates nodes whose ancestor was already detached
        for unwanted in clone.select(selector):
            unwanted.extract()
    return clone
