"""Bounded-time outbound HTTP fetching shared by extraction and relay."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from enum import Enum
from urllib.parse import urlparse

import httpx

logger = logging.getLogger(__name__)


class FetchPurpose(str, Enum):
    """Why a fetch is being made; selects the header profile."""

    EXTRACT = "extract"
    RELAY = "relay"


# Desktop Chrome identities; the relay profile mirrors a newer browser build
EXTRACT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)
RELAY_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)
FALLBACK_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"


class FetchError(Exception):
    """Base exception for outbound fetch failures."""

    def __init__(self, message: str, url: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.cause = cause


class FetchTimeoutError(FetchError):
    """Raised when the wall-clock budget expires before a response arrives."""

    pass


class NetworkError(FetchError):
    """Raised for connection, DNS, protocol and redirect failures."""

    pass


@dataclass(frozen=True)
class FetchRequest:
    """One outbound GET, scoped to a single inbound request."""

    url: str
    purpose: FetchPurpose
    timeout_seconds: float

    def headers(self) -> dict[str, str]:
        """Browser-like headers for the first attempt."""
        if self.purpose is FetchPurpose.RELAY:
            parsed = urlparse(self.url)
            origin = f"{parsed.scheme}://{parsed.netloc}"
            return {
                "User-Agent": RELAY_USER_AGENT,
                "Accept": (
                    "text/html,application/xhtml+xml,application/xml;q=0.9,"
                    "image/avif,image/webp,image/apng,*/*;q=0.8"
                ),
                "Accept-Language": "en-US,en;q=0.9",
                "Referer": origin,
                "Origin": origin,
            }
        return {
            "User-Agent": EXTRACT_USER_AGENT,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "en-US,en;q=0.9",
        }

    def fallback_headers(self) -> dict[str, str]:
        """Minimal header set used for the single retry after HTTP 403."""
        return {"User-Agent": FALLBACK_USER_AGENT}


@dataclass
class FetchResult:
    """Outcome of a completed fetch (any HTTP status)."""

    url: str
    status_code: int
    reason_phrase: str
    headers: dict[str, str] = field(default_factory=dict)
    text: str = ""
    attempts: int = 1

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def content_type(self) -> str:
        return self.headers.get("content-type", "")


class Fetcher:
    """Perform a single bounded-time GET with a one-shot 403 fallback.

    Usage:
        fetcher = Fetcher()
        result = await fetcher.fetch(
            FetchRequest(url, FetchPurpose.EXTRACT, timeout_seconds=10)
        )
        if result.ok:
            print(result.text)

    The timeout is a hard wall-clock budget covering both attempts. When it
    expires the in-flight request is cancelled and FetchTimeoutError raised.
    """

    def __init__(
        self,
        max_redirects: int = 10,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.max_redirects = max_redirects
        self._transport = transport

    async def fetch(self, request: FetchRequest) -> FetchResult:
        """Fetch ``request.url``.

        Returns:
            FetchResult for whatever status the target answered with.

        Raises:
            FetchTimeoutError: If the budget expires.
            NetworkError: If the request cannot be completed.
        """
        logger.info("Fetching %s (purpose=%s)", request.url, request.purpose.value)
        try:
            return await asyncio.wait_for(
                self._fetch_with_fallback(request),
                timeout=request.timeout_seconds,
            )
        except asyncio.TimeoutError as e:
            logger.warning(
                "Fetch of %s exceeded %.1fs budget", request.url, request.timeout_seconds
            )
            raise FetchTimeoutError(
                f"Request timed out after {request.timeout_seconds}s", request.url, e
            ) from e
        except httpx.TimeoutException as e:
            logger.warning("Transport timeout fetching %s: %s", request.url, e)
            raise FetchTimeoutError(
                f"Request timed out after {request.timeout_seconds}s", request.url, e
            ) from e
        except httpx.TooManyRedirects as e:
            raise NetworkError(
                f"Too many redirects (max {self.max_redirects})", request.url, e
            ) from e
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise NetworkError(f"Request failed: {e}", request.url, e) from e

    async def _fetch_with_fallback(self, request: FetchRequest) -> FetchResult:
        async with httpx.AsyncClient(
            timeout=httpx.Timeout(request.timeout_seconds),
            follow_redirects=True,
            max_redirects=self.max_redirects,
            transport=self._transport,
        ) as client:
            response = await client.get(request.url, headers=request.headers())
            attempts = 1

            # Exactly one retry, whatever the second attempt returns
            if response.status_code == 403:
                logger.info("403 from %s, retrying with minimal headers", request.url)
                response = await client.get(
                    request.url, headers=request.fallback_headers()
                )
                attempts = 2

            return FetchResult(
                url=str(response.url),
                status_code=response.status_code,
                # HTTP/2 responses carry no reason phrase
                reason_phrase=response.reason_phrase
                or httpx.codes.get_reason_phrase(response.status_code),
                headers={k.lower(): v for k, v in response.headers.items()},
                text=response.text,
                attempts=attempts,
            )
