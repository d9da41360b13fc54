"""Tests for the relay service.

Tests cover:
- URL-only short circuits (video, PDF, share links)
- Content-type routing after the fetch
- JSON error sniffing
- Mapping of every failure to a synthetic 200 page
"""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import httpx
import pytest

from app.services.classifier import ContentKind
from app.services.fetcher import (
    Fetcher,
    FetchPurpose,
    FetchTimeoutError,
    NetworkError,
    RELAY_USER_AGENT,
)
from app.services.relay import RelayOutcome, RelayService, sniff_json_error

URL = "https://example.com/dir/page.html"


def _service(handler) -> RelayService:
    return RelayService(fetcher=Fetcher(transport=httpx.MockTransport(handler)))


# -----------------------------------------------------------------------------
# JSON error sniffing
# -----------------------------------------------------------------------------


class TestSniffJsonError:
    def test_string_error(self) -> None:
        assert sniff_json_error('{"error": "Not allowed"}') == "Not allowed"

    def test_nested_message(self) -> None:
        body = '  {"error": {"message": "Quota exceeded", "code": 429}}'
        assert sniff_json_error(body) == "Quota exceeded"

    def test_non_string_error_serialized(self) -> None:
        assert sniff_json_error('{"error": {"code": 7}}') == '{"code": 7}'

    @pytest.mark.parametrize(
        "body",
        [
            "<html><body>{}</body></html>",
            '{"data": 1}',
            '{"error": ""}',
            "[1, 2, 3]",
            "{not json",
            "",
        ],
    )
    def test_not_an_error(self, body: str) -> None:
        assert sniff_json_error(body) is None


# -----------------------------------------------------------------------------
# Short circuits
# -----------------------------------------------------------------------------


class TestShortCircuits:
    @pytest.mark.asyncio
    async def test_pdf_url_served_in_viewer(self) -> None:
        with patch.object(Fetcher, "fetch", new_callable=AsyncMock) as mock_fetch:
            result = await RelayService().relay("https://example.com/a/report.pdf")

        mock_fetch.assert_not_called()
        assert result.outcome is RelayOutcome.PDF_VIEWER
        assert result.content_kind is ContentKind.PDF
        assert result.status_code == 200
        assert 'src="https://example.com/a/report.pdf"' in result.html

    @pytest.mark.asyncio
    async def test_video_url_served_in_player(self) -> None:
        with patch.object(Fetcher, "fetch", new_callable=AsyncMock) as mock_fetch:
            result = await RelayService().relay("https://www.youtube.com/watch?v=XYZ789")

        mock_fetch.assert_not_called()
        assert result.outcome is RelayOutcome.VIDEO_PLAYER
        assert "https://www.youtube.com/embed/XYZ789" in result.html

    @pytest.mark.asyncio
    async def test_share_url(self) -> None:
        with patch.object(Fetcher, "fetch", new_callable=AsyncMock) as mock_fetch:
            result = await RelayService().relay("https://share.google/abc")

        mock_fetch.assert_not_called()
        assert result.outcome is RelayOutcome.SHARED_CONTENT


# -----------------------------------------------------------------------------
# Fetched pages
# -----------------------------------------------------------------------------


class TestFetchedPages:
    @pytest.mark.asyncio
    async def test_html_is_rewritten(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(
                200,
                headers={"Content-Type": "text/html"},
                text=(
                    '<html><head><meta http-equiv="X-Frame-Options" content="DENY">'
                    '</head><body><a href="../c">c</a></body></html>'
                ),
            )

        result = await _service(handler).relay(URL)

        assert result.outcome is RelayOutcome.REWRITTEN
        assert result.status_code == 200
        assert 'href="https://example.com/c"' in result.html
        assert "X-Frame-Options" not in result.html
        assert seen[0].headers["User-Agent"] == RELAY_USER_AGENT
        assert seen[0].headers["Referer"] == "https://example.com"

    @pytest.mark.asyncio
    async def test_relay_budget_is_fifteen_seconds(self) -> None:
        with patch.object(
            Fetcher, "fetch", new_callable=AsyncMock, side_effect=FetchTimeoutError("t", URL)
        ) as mock_fetch:
            await RelayService().relay(URL)

        request = mock_fetch.call_args.args[0]
        assert request.purpose is FetchPurpose.RELAY
        assert request.timeout_seconds == 15.0

    @pytest.mark.asyncio
    async def test_references_resolve_against_final_url(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/dir/page.html":
                return httpx.Response(302, headers={"Location": "/new/home.html"})
            return httpx.Response(200, text='<html><body><img src="x.png"></body></html>')

        result = await _service(handler).relay(URL)

        assert 'src="https://example.com/new/x.png"' in result.html

    @pytest.mark.asyncio
    async def test_missing_content_type_treated_as_html(self) -> None:
        result = await _service(
            lambda request: httpx.Response(200, content=b"<html><body>ok</body></html>")
        ).relay(URL)

        assert result.outcome is RelayOutcome.REWRITTEN

    @pytest.mark.asyncio
    async def test_pdf_content_type_served_in_viewer(self) -> None:
        result = await _service(
            lambda request: httpx.Response(
                200, headers={"Content-Type": "application/pdf"}, content=b"%PDF-1.7"
            )
        ).relay("https://example.com/download/7")

        assert result.outcome is RelayOutcome.PDF_VIEWER
        assert 'src="https://example.com/download/7"' in result.html

    @pytest.mark.asyncio
    async def test_unsupported_content_type(self) -> None:
        result = await _service(
            lambda request: httpx.Response(
                200, headers={"Content-Type": "image/png"}, content=b"\x89PNG"
            )
        ).relay(URL)

        assert result.outcome is RelayOutcome.UNSUPPORTED_TYPE
        assert result.status_code == 200
        assert "image/png" in result.html

    @pytest.mark.asyncio
    async def test_json_error_body(self) -> None:
        result = await _service(
            lambda request: httpx.Response(
                200,
                headers={"Content-Type": "text/plain"},
                text='{"error": {"message": "Login required"}}',
            )
        ).relay(URL)

        assert result.outcome is RelayOutcome.CONTENT_ERROR
        assert "Login required" in result.html


# -----------------------------------------------------------------------------
# Failures
# -----------------------------------------------------------------------------


class TestFailures:
    @pytest.mark.asyncio
    async def test_non_2xx_is_unavailable_page(self) -> None:
        result = await _service(lambda request: httpx.Response(404)).relay(URL)

        assert result.outcome is RelayOutcome.UNAVAILABLE
        assert result.status_code == 200
        assert "404 Not Found" in result.html
        assert f'href="{URL}"' in result.html

    @pytest.mark.asyncio
    async def test_timeout_page(self) -> None:
        with patch.object(
            Fetcher, "fetch", new_callable=AsyncMock, side_effect=FetchTimeoutError("t", URL)
        ):
            result = await RelayService().relay(URL)

        assert result.outcome is RelayOutcome.TIMEOUT
        assert result.status_code == 200
        assert "Request Timeout" in result.html

    @pytest.mark.asyncio
    async def test_network_error_page(self) -> None:
        with patch.object(
            Fetcher, "fetch", new_callable=AsyncMock, side_effect=NetworkError("down", URL)
        ):
            result = await RelayService().relay(URL)

        assert result.outcome is RelayOutcome.FAILED
        assert "Failed to Load Content" in result.html

    @pytest.mark.asyncio
    async def test_unexpected_error_page(self) -> None:
        with patch.object(
            Fetcher, "fetch", new_callable=AsyncMock, side_effect=RuntimeError("boom")
        ):
            result = await RelayService().relay(URL)

        assert result.outcome is RelayOutcome.FAILED
        assert result.status_code == 200
        assert "Proxy Error" in result.html
