"""Content classification from URL shape and declared content type."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from urllib.parse import parse_qs, urlparse

logger = logging.getLogger(__name__)

# Hosts are matched exactly or as a parent domain (www.youtube.com -> youtube.com)
VIDEO_HOSTS = ("youtube.com", "youtu.be")
VIDEO_SHORT_LINK_HOST = "youtu.be"
SHARE_LINK_HOSTS = ("share.google",)

EMBED_URL_TEMPLATE = "https://www.youtube.com/embed/{video_id}"

RENDERABLE_CONTENT_TYPES = ("text/html", "text/plain", "application/xhtml")


class ContentKind(str, Enum):
    """Routing decision for a target URL.

    Pages that are not videos, PDFs or share links are generic HTML and
    classify as ARTICLE.
    """

    ARTICLE = "article"
    VIDEO = "video"
    PDF = "pdf"
    EXTERNAL_SHARE = "externalShare"


@dataclass(frozen=True)
class Classification:
    """Result of classifying a URL."""

    kind: ContentKind
    video_id: str | None = None

    @property
    def embed_url(self) -> str | None:
        if self.video_id is None:
            return None
        return EMBED_URL_TEMPLATE.format(video_id=self.video_id)


def _host_matches(host: str, domains: tuple[str, ...]) -> bool:
    return any(host == domain or host.endswith("." + domain) for domain in domains)


def extract_video_id(url: str) -> str:
    """Derive the platform video identifier from a video URL.

    Short links carry the identifier as the first path segment; watch URLs
    carry it in the ``v`` query parameter, other URLs on the main domain
    (``/embed/<id>``, ``/shorts/<id>``) as the last path segment.
    """
    parsed = urlparse(url)
    host = (parsed.hostname or "").lower()
    segments = parsed.path.split("/")

    if _host_matches(host, (VIDEO_SHORT_LINK_HOST,)):
        video_id = segments[1] if len(segments) > 1 else ""
    else:
        video_id = parse_qs(parsed.query).get("v", [""])[0] or segments[-1]

    # Drop any query-string residue left in the identifier
    return video_id.split("?")[0].split("&")[0]


def is_pdf_url(url: str) -> bool:
    """True when the URL's path or query mentions ``.pdf``."""
    parsed = urlparse(url)
    return ".pdf" in parsed.path.lower() or ".pdf" in parsed.query.lower()


def is_pdf_content_type(content_type: str) -> bool:
    return "application/pdf" in content_type.lower()


def is_renderable_content_type(content_type: str) -> bool:
    """True for HTML, XHTML and plain text; an absent type counts as HTML."""
    ct_lower = content_type.lower()
    if not ct_lower.strip():
        return True
    return any(kind in ct_lower for kind in RENDERABLE_CONTENT_TYPES)


def classify(url: str) -> Classification:
    """Classify a target URL before any network fetch.

    Order: video host, ``.pdf`` in path or query, denylisted share host,
    otherwise a generic article page. A video-host URL without a derivable
    identifier (e.g. the site's home page) is not treated as a video.
    """
    host = (urlparse(url).hostname or "").lower()

    if _host_matches(host, VIDEO_HOSTS):
        video_id = extract_video_id(url)
        if video_id:
            logger.debug("Classified %s as video (id=%s)", url, video_id)
            return Classification(ContentKind.VIDEO, video_id=video_id)

    if is_pdf_url(url):
        return Classification(ContentKind.PDF)

    if _host_matches(host, SHARE_LINK_HOSTS):
        return Classification(ContentKind.EXTERNAL_SHARE)

    return Classification(ContentKind.ARTICLE)
