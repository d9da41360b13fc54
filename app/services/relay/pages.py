"""Synthetic HTML pages served by the relay in place of the target page.

Every page is self-contained, embeddable in an iframe, and (except the
viewers) offers a link to open the original URL directly.
"""

from __future__ import annotations

import html as html_lib

STATUS_PAGE_CSS = """
    body {
      font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
      display: flex;
      align-items: center;
      justify-content: center;
      height: 100vh;
      margin: 0;
      background: #f5f5f5;
      text-align: center;
      padding: 20px;
    }
    .error-container {
      background: white;
      padding: 40px;
      border-radius: 8px;
      box-shadow: 0 2px 10px rgba(0,0,0,0.1);
      max-width: 500px;
    }
    h1 { color: #dc2626; margin-bottom: 16px; }
    p { color: #6b7280; margin-bottom: 24px; line-height: 1.6; }
    a {
      color: #059669;
      text-decoration: none;
      font-weight: 600;
      border-bottom: 2px solid #059669;
    }
    a:hover { color: #047857; }
"""

VIEWER_PAGE_CSS = """
    * { margin: 0; padding: 0; box-sizing: border-box; }
    body {
      font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
      background: #525252;
      overflow: hidden;
    }
    iframe {
      width: 100vw;
      height: 100vh;
      border: none;
    }
"""


def _escape(value: str) -> str:
    return html_lib.escape(value, quote=True)


def _open_original_link(url: str | None) -> str:
    if not url:
        return ""
    return (
        f'<p><a href="{_escape(url)}" target="_blank" rel="noopener noreferrer">'
        "Open in new tab</a> to view the content directly.</p>"
    )


def render_status_page(
    title: str,
    paragraphs: list[str],
    url: str | None,
    heading: str | None = None,
) -> str:
    """Render a centered status card.

    Args:
        title: Document title (also the heading unless ``heading`` is given)
        paragraphs: Body paragraphs as already-escaped HTML fragments
        url: Original URL for the escape-hatch link (omitted when None)
        heading: Optional heading differing from the title
    """
    lines: list[str] = [
        "<!DOCTYPE html>",
        "<html>",
        "<head>",
        '  <meta charset="utf-8">',
        f"  <title>{_escape(title)}</title>",
        f"  <style>{STATUS_PAGE_CSS}  </style>",
        "</head>",
        "<body>",
        '  <div class="error-container">',
        f"    <h1>{_escape(heading or title)}</h1>",
    ]
    lines.extend(f"    <p>{paragraph}</p>" for paragraph in paragraphs)
    link = _open_original_link(url)
    if link:
        lines.append(f"    {link}")
    lines.extend(["  </div>", "</body>", "</html>"])
    return "\n".join(lines)


def render_viewer_page(title: str, frame_src: str, frame_attrs: str = "") -> str:
    """Render a page whose only content is a full-viewport iframe."""
    attrs = f" {frame_attrs}" if frame_attrs else ""
    lines = [
        "<!DOCTYPE html>",
        "<html>",
        "<head>",
        '  <meta charset="utf-8">',
        '  <meta name="viewport" content="width=device-width, initial-scale=1.0">',
        f"  <title>{_escape(title)}</title>",
        f"  <style>{VIEWER_PAGE_CSS}  </style>",
        "</head>",
        "<body>",
        f'  <iframe src="{_escape(frame_src)}"{attrs}></iframe>',
        "</body>",
        "</html>",
    ]
    return "\n".join(lines)


def unavailable_page(url: str, status_code: int, reason: str) -> str:
    return render_status_page(
        "Content Unavailable",
        [
            "We're unable to load this content. The website may be blocking our "
            "access or the content may have been removed.",
            f"<strong>Error:</strong> {status_code} {_escape(reason)}",
        ],
        url,
    )


def pdf_viewer_page(url: str) -> str:
    return render_viewer_page("PDF Viewer", url, 'type="application/pdf"')


def video_player_page(embed_url: str) -> str:
    return render_viewer_page(
        "Video Player",
        embed_url,
        'allow="accelerometer; autoplay; clipboard-write; encrypted-media; '
        'gyroscope; picture-in-picture" allowfullscreen',
    )


def unsupported_type_page(url: str, content_type: str) -> str:
    return render_status_page(
        "Unsupported Content Type",
        [
            "This content type cannot be displayed in our viewer: "
            f"<strong>{_escape(content_type)}</strong>",
        ],
        url,
    )


def content_error_page(url: str, message: str) -> str:
    return render_status_page(
        "Content Error",
        [_escape(message or "Unable to load content")],
        url,
    )


def timeout_page(url: str) -> str:
    return render_status_page(
        "Request Timeout",
        ["The content is taking too long to load. Please try again later."],
        url,
    )


def shared_content_page(url: str) -> str:
    return render_status_page(
        "Shared Content",
        [
            "This is shared content that cannot be displayed here. "
            "Please view the content by accessing the original link.",
        ],
        url,
    )


def load_failure_page(url: str | None) -> str:
    return render_status_page(
        "Proxy Error",
        [
            "We encountered an error while trying to load this content. "
            "Please try again later.",
        ],
        url,
        heading="Failed to Load Content",
    )
