"""Tests for relay synthetic pages."""

from __future__ import annotations

from app.services.relay import pages

URL = "https://example.com/story"


class TestStatusPages:
    def test_unavailable_page(self) -> None:
        html = pages.unavailable_page(URL, 404, "Not Found")

        assert html.startswith("<!DOCTYPE html>")
        assert "<title>Content Unavailable</title>" in html
        assert "404 Not Found" in html
        assert f'href="{URL}"' in html
        assert "Open in new tab" in html

    def test_timeout_page(self) -> None:
        html = pages.timeout_page(URL)
        assert "Request Timeout" in html
        assert "Open in new tab" in html

    def test_unsupported_type_page(self) -> None:
        html = pages.unsupported_type_page(URL, "image/png")
        assert "Unsupported Content Type" in html
        assert "<strong>image/png</strong>" in html

    def test_content_error_page_default_message(self) -> None:
        assert "Unable to load content" in pages.content_error_page(URL, "")

    def test_load_failure_page(self) -> None:
        html = pages.load_failure_page(URL)
        assert "<title>Proxy Error</title>" in html
        assert "<h1>Failed to Load Content</h1>" in html

    def test_load_failure_page_without_url(self) -> None:
        assert "Open in new tab" not in pages.load_failure_page(None)

    def test_shared_content_page(self) -> None:
        assert "Shared Content" in pages.shared_content_page(URL)


class TestViewerPages:
    def test_pdf_viewer(self) -> None:
        html = pages.pdf_viewer_page("https://example.com/a.pdf")
        assert '<iframe src="https://example.com/a.pdf" type="application/pdf">' in html

    def test_video_player(self) -> None:
        html = pages.video_player_page("https://www.youtube.com/embed/ABC123")
        assert 'src="https://www.youtube.com/embed/ABC123"' in html
        assert "allowfullscreen" in html


class TestEscaping:
    def test_url_is_escaped(self) -> None:
        url = 'https://example.com/?a=1&b="><script>alert(1)</script>'
        html = pages.timeout_page(url)

        assert "<script>" not in html
        assert "&amp;b=&quot;&gt;&lt;script&gt;" in html

    def test_error_message_is_escaped(self) -> None:
        html = pages.content_error_page(URL, "<b>bad</b>")
        assert "&lt;b&gt;bad&lt;/b&gt;" in html

    def test_reason_is_escaped(self) -> None:
        html = pages.unavailable_page(URL, 500, "<oops>")
        assert "&lt;oops&gt;" in html

    def test_pdf_viewer_src_is_escaped(self) -> None:
        html = pages.pdf_viewer_page('https://example.com/a.pdf?"onload="x')
        assert 'src="https://example.com/a.pdf?&quot;onload=&quot;x"' in html
