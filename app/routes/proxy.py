"""Relay (iframe proxy) REST endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Query
from fastapi.responses import HTMLResponse

from app.schemas.common import ErrorResponse, MessageResponse
from app.services.relay import RelayService
from app.services.urls import validate_target_url

router = APIRouter(tags=["proxy"])

# Allows the relayed page to be framed and fetched from any origin
EMBED_HEADERS = {"Access-Control-Allow-Origin": "*"}


@router.get("/proxy/test", response_model=MessageResponse)
async def proxy_test() -> MessageResponse:
    """Static liveness check for the relay route."""
    return MessageResponse(message="Proxy endpoint is working!")


@router.get(
    "/proxy",
    response_class=HTMLResponse,
    responses={400: {"model": ErrorResponse, "description": "Missing or invalid URL"}},
)
async def proxy(
    url: str | None = Query(default=None, description="Page to relay"),
) -> HTMLResponse:
    """Serve an embeddable rendering of ``url``.

    Always 200 with an HTML body (the rewritten page or a synthetic status
    page), except 400 JSON for a missing or malformed URL.
    """
    target_url = validate_target_url(url)
    result = await RelayService().relay(target_url)
    return HTMLResponse(
        content=result.html,
        status_code=result.status_code,
        headers=EMBED_HEADERS,
    )
