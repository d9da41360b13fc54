"""HTML rewriting that makes a fetched page embeddable.

``rewrite_document`` is a pure string-to-string transformation: it parses
its own tree, so callers never share a mutable document.
"""

from __future__ import annotations

import logging
import re
from urllib.parse import urljoin

from bs4 import BeautifulSoup

from app.services.extractors.dom import get_attr, parse_document

logger = logging.getLogger(__name__)

# (tag, attribute) pairs whose relative references are made absolute
REWRITE_TARGETS: tuple[tuple[str, str], ...] = (
    ("a", "href"),
    ("img", "src"),
    ("link", "href"),
    ("script", "src"),
)

_SCHEME = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*:")


def is_relative_reference(reference: str) -> bool:
    """True unless the reference has a scheme or starts with ``//`` or ``#``.

    ``data:``, ``mailto:`` and ``javascript:`` references count as having a
    scheme and are left alone.
    """
    reference = reference.strip()
    if not reference:
        return False
    if reference.startswith(("//", "#")):
        return False
    return _SCHEME.match(reference) is None


def resolve_reference(reference: str, base_url: str) -> str:
    """Resolve a relative reference against ``base_url``.

    Absolute references, and references that cannot be resolved, are
    returned unchanged.
    """
    if not is_relative_reference(reference):
        return reference
    try:
        return urljoin(base_url, reference.strip())
    except ValueError:
        logger.debug("Could not resolve %r against %s", reference, base_url)
        return reference


def strip_frame_blockers(soup: BeautifulSoup) -> int:
    """Remove meta tags that would stop the page from rendering in an iframe.

    Removes X-Frame-Options equivalents, Content-Security-Policy metas with a
    frame-ancestors directive, and any other http-equiv naming "frame".

    Returns:
        Number of meta tags removed.
    """
    removed = 0
    for meta in soup.find_all("meta", attrs={"http-equiv": True}):
        http_equiv = get_attr(meta, "http-equiv").strip().lower()
        content = get_attr(meta, "content").lower()

        blocks_framing = (
            http_equiv == "x-frame-options"
            or (http_equiv == "content-security-policy" and "frame-ancestors" in content)
            or "frame" in http_equiv
        )
        if blocks_framing:
            meta.extract()
            removed += 1
    return removed


def rewrite_references(soup: BeautifulSoup, base_url: str) -> int:
    """Make relative link, image, stylesheet and script references absolute.

    Returns:
        Number of attributes rewritten.
    """
    rewritten = 0
    for tag_name, attribute in REWRITE_TARGETS:
        for tag in soup.find_all(tag_name, attrs={attribute: True}):
            original = get_attr(tag, attribute)
            resolved = resolve_reference(original, base_url)
            if resolved != original:
                tag[attribute] = resolved
                rewritten += 1
    return rewritten


def rewrite_document(html: str, base_url: str) -> str:
    """Return ``html`` with frame blockers removed and references made absolute."""
    soup = parse_document(html)
    removed = strip_frame_blockers(soup)
    rewritten = rewrite_references(soup, base_url)
    logger.debug(
        "Rewrote %s: removed %d frame blockers, rewrote %d references",
        base_url,
        removed,
        rewritten,
    )
    return str(soup)
