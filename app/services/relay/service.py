"""Relay service: fetch a page and re-serve it in an embeddable form."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from enum import Enum

from app.core.config import settings
from app.services.classifier import (
    ContentKind,
    classify,
    is_pdf_content_type,
    is_renderable_content_type,
)
from app.services.fetcher import (
    Fetcher,
    FetchPurpose,
    FetchRequest,
    FetchTimeoutError,
    NetworkError,
)
from app.services.relay import pages
from app.services.relay.rewriter import rewrite_document

logger = logging.getLogger(__name__)


class RelayOutcome(str, Enum):
    """Which page the relay produced."""

    REWRITTEN = "rewritten"
    PDF_VIEWER = "pdf_viewer"
    VIDEO_PLAYER = "video_player"
    SHARED_CONTENT = "shared_content"
    UNAVAILABLE = "unavailable"
    UNSUPPORTED_TYPE = "unsupported_type"
    CONTENT_ERROR = "content_error"
    TIMEOUT = "timeout"
    FAILED = "failed"


@dataclass(frozen=True)
class RelayResult:
    """HTML to serve for one relay request.

    ``status_code`` is always 200: an embedding iframe must render a page
    rather than a browser network-error screen.
    """

    html: str
    content_kind: ContentKind
    outcome: RelayOutcome
    status_code: int = 200


def sniff_json_error(body: str) -> str | None:
    """Best-effort detection of a JSON error payload served as a page.

    Only bodies starting with ``{`` or ``[`` are considered; this is a
    heuristic, not content-type detection.

    Returns:
        The error message, or None if the body is not a JSON error.
    """
    stripped = body.strip()
    if not stripped.startswith(("{", "[")):
        return None
    try:
        payload = json.loads(stripped)
    except ValueError:
        return None
    if not isinstance(payload, dict) or not payload.get("error"):
        return None

    error = payload["error"]
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    return error if isinstance(error, str) else json.dumps(error)


class RelayService:
    """Produce embeddable HTML for a target URL.

    Usage:
        result = await RelayService().relay("https://example.com/story")
        return HTMLResponse(result.html, status_code=result.status_code)

    Never raises: every failure mode maps to a synthetic page.
    """

    def __init__(
        self,
        fetcher: Fetcher | None = None,
        timeout_seconds: float | None = None,
    ) -> None:
        self.fetcher = fetcher or Fetcher(max_redirects=settings.fetch_max_redirects)
        self.timeout_seconds = (
            timeout_seconds if timeout_seconds is not None else settings.relay_fetch_timeout
        )

    async def relay(self, url: str) -> RelayResult:
        try:
            result = await self._relay(url)
        except Exception:
            logger.exception("Relay failed for %s", url)
            result = RelayResult(
                pages.load_failure_page(url), ContentKind.ARTICLE, RelayOutcome.FAILED
            )
        logger.info("Relay %s -> %s", url, result.outcome.value)
        return result

    async def _relay(self, url: str) -> RelayResult:
        classification = classify(url)

        match classification.kind:
            case ContentKind.VIDEO:
                return RelayResult(
                    pages.video_player_page(classification.embed_url or url),
                    ContentKind.VIDEO,
                    RelayOutcome.VIDEO_PLAYER,
                )
            case ContentKind.PDF:
                return RelayResult(
                    pages.pdf_viewer_page(url), ContentKind.PDF, RelayOutcome.PDF_VIEWER
                )
            case ContentKind.EXTERNAL_SHARE:
                return RelayResult(
                    pages.shared_content_page(url),
                    ContentKind.EXTERNAL_SHARE,
                    RelayOutcome.SHARED_CONTENT,
                )

        try:
            fetched = await self.fetcher.fetch(
                FetchRequest(url, FetchPurpose.RELAY, self.timeout_seconds)
            )
        except FetchTimeoutError:
            return RelayResult(
                pages.timeout_page(url), ContentKind.ARTICLE, RelayOutcome.TIMEOUT
            )
        except NetworkError as e:
            logger.warning("Relay fetch failed for %s: %s", url, e)
            return RelayResult(
                pages.load_failure_page(url), ContentKind.ARTICLE, RelayOutcome.FAILED
            )

        if not fetched.ok:
            return RelayResult(
                pages.unavailable_page(url, fetched.status_code, fetched.reason_phrase),
                ContentKind.ARTICLE,
                RelayOutcome.UNAVAILABLE,
            )

        content_type = fetched.content_type
        if is_pdf_content_type(content_type):
            return RelayResult(
                pages.pdf_viewer_page(url), ContentKind.PDF, RelayOutcome.PDF_VIEWER
            )

        if not is_renderable_content_type(content_type):
            return RelayResult(
                pages.unsupported_type_page(url, content_type),
                ContentKind.ARTICLE,
                RelayOutcome.UNSUPPORTED_TYPE,
            )

        error_message = sniff_json_error(fetched.text)
        if error_message is not None:
            return RelayResult(
                pages.content_error_page(url, error_message),
                ContentKind.ARTICLE,
                RelayOutcome.CONTENT_ERROR,
            )

        return RelayResult(
            rewrite_document(fetched.text, fetched.url),
            ContentKind.ARTICLE,
            RelayOutcome.REWRITTEN,
        )
