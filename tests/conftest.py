"""Shared pytest fixtures for route and service tests.

Usage in test files:
    def test_something(shared_client, article_html):
        resp = shared_client.get("/health")
        ...
"""

from __future__ import annotations

from typing import Callable

import httpx
import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.services.fetcher import Fetcher


# ------------------------------------------------------------------
# Client fixtures
# ------------------------------------------------------------------


@pytest.fixture()
def shared_client() -> TestClient:
    """TestClient that reports unhandled errors as HTTP 500 responses."""
    with TestClient(app, raise_server_exceptions=False) as tc:
        yield tc


# ------------------------------------------------------------------
# Fetcher fixtures
# ------------------------------------------------------------------


@pytest.fixture()
def mock_fetcher() -> Callable[[Callable[[httpx.Request], httpx.Response]], Fetcher]:
    """Factory building a Fetcher whose requests are answered by ``handler``.

    Usage:
        fetcher = mock_fetcher(lambda request: httpx.Response(200, text="ok"))
    """

    def _make(handler) -> Fetcher:
        return Fetcher(transport=httpx.MockTransport(handler))

    return _make


# ------------------------------------------------------------------
# HTML fixtures
# ------------------------------------------------------------------


def _paragraphs(count: int, prefix: str = "Paragraph") -> str:
    return "\n".join(
        f"<p>{prefix} {i} talks about urban planning, transit corridors and "
        f"the quiet streets of the old town in some detail.</p>"
        for i in range(count)
    )


@pytest.fixture()
def make_paragraphs() -> Callable[..., str]:
    """Factory producing N ~120-char paragraphs of filler article text."""
    return _paragraphs


@pytest.fixture()
def article_html() -> str:
    """A realistic article page with chrome, metadata and a long body."""
    return f"""<!DOCTYPE html>
<html>
<head>
  <title>Fallback Title | Example News</title>
  <meta property="og:title" content="The Quiet Streets of the Old Town">
  <meta property="og:description" content="A walk through the historic center.">
  <meta name="author" content="Jane Doe">
  <meta property="article:published_time" content="2024-03-15T08:00:00Z">
</head>
<body>
  <nav><a href="/">Home</a> <a href="/world">World</a></nav>
  <article>
    <h1>The Quiet Streets of the Old Town</h1>
    <div class="social-share">Share on Facebook</div>
    {_paragraphs(10)}
    <ul>
      <li>Museum of the city, open daily</li>
      <li>Cathedral square market</li>
    </ul>
    <script>console.log("tracking");</script>
  </article>
  <footer>Copyright Example News</footer>
</body>
</html>"""
