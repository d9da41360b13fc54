"""Relay module for the /proxy endpoint.

Fetches a page, strips frame-blocking meta tags, makes relative references
absolute and re-serves it so it can be embedded in an iframe. Failures are
rendered as synthetic HTML pages instead of HTTP errors.
"""

from app.services.relay.rewriter import (
    is_relative_reference,
    resolve_reference,
    rewrite_document,
)
from app.services.relay.service import (
    RelayOutcome,
    RelayResult,
    RelayService,
    sniff_json_error,
)

__all__ = [
    "RelayOutcome",
    "RelayResult",
    "RelayService",
    "is_relative_reference",
    "resolve_reference",
    "rewrite_document",
    "sniff_json_error",
]
