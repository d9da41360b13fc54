"""Exception hierarchy for content extraction."""

from __future__ import annotations


class ExtractionError(Exception):
    """Base exception for all extraction errors."""

    pass


class UpstreamHTTPError(ExtractionError):
    """Raised when the target answers with a non-2xx status."""

    def __init__(self, status_code: int, reason: str, url: str) -> None:
        super().__init__(f"HTTP {status_code} from {url}: {reason}")
        self.status_code = status_code
        self.reason = reason
        self.url = url
