"""Tests for extraction exceptions."""

from __future__ import annotations

from app.services.extractors.exceptions import ExtractionError, UpstreamHTTPError
from app.services.fetcher import FetchError, FetchTimeoutError, NetworkError


class TestExceptionHierarchy:
    """Test the extraction and fetch exception hierarchies."""

    def test_upstream_http_error_inherits_from_extraction_error(self) -> None:
        """Test UpstreamHTTPError is a subclass of ExtractionError."""
        assert issubclass(UpstreamHTTPError, ExtractionError)

    def test_fetch_errors_inherit_from_fetch_error(self) -> None:
        """Test timeout and network errors share the FetchError base."""
        assert issubclass(FetchTimeoutError, FetchError)
        assert issubclass(NetworkError, FetchError)

    def test_extraction_error_inherits_from_exception(self) -> None:
        """Test ExtractionError is a subclass of Exception."""
        assert issubclass(ExtractionError, Exception)


class TestExceptionAttributes:
    """Test exception payloads."""

    def test_upstream_http_error_attributes(self) -> None:
        error = UpstreamHTTPError(404, "Not Found", "https://example.com/x")

        assert error.status_code == 404
        assert error.reason == "Not Found"
        assert error.url == "https://example.com/x"
        assert "404" in str(error)

    def test_fetch_error_keeps_cause(self) -> None:
        cause = ValueError("boom")
        error = NetworkError("Request failed", "https://example.com", cause)

        assert error.url == "https://example.com"
        assert error.cause is cause
        assert str(error) == "Request failed"
