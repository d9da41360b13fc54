"""Validation of caller-supplied target URLs."""

from __future__ import annotations

from urllib.parse import urlparse

from app.exceptions import InvalidURLError, MissingURLError

ALLOWED_SCHEMES = frozenset({"http", "https"})


def validate_target_url(raw: str | None) -> str:
    """Check that ``raw`` is an absolute http(s) URL and return it stripped.

    Raises:
        MissingURLError: If the value is missing or blank.
        InvalidURLError: If the value does not parse as an absolute http(s) URL.
    """
    if raw is None or not raw.strip():
        raise MissingURLError()

    url = raw.strip()
    try:
        parsed = urlparse(url)
        # Accessing .port validates the netloc (raises on garbage ports)
        _ = parsed.port
    except ValueError as e:
        raise InvalidURLError(url) from e

    if parsed.scheme.lower() not in ALLOWED_SCHEMES or not parsed.hostname:
        raise InvalidURLError(url)

    return url
