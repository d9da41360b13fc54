"""Custom exceptions for the article relay service.

Only caller-facing input errors live here. Outbound fetch failures are
defined next to the fetcher and extraction failures in the extractors
package.
"""

from __future__ import annotations


class InputError(Exception):
    """Base exception for rejected inbound requests.

    Error Code: HTTP 400 on both the extraction and relay endpoints.
    """

    pass


class MissingURLError(InputError):
    """Raised when the ``url`` query parameter is absent or blank."""

    def __init__(self) -> None:
        super().__init__("URL is required")


class InvalidURLError(InputError):
    """Raised when the ``url`` query parameter is not an absolute http(s) URL."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__("Invalid URL format")
