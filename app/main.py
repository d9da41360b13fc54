"""FastAPI application entry point for article-relay-service.

Configures logging, middleware, exception handlers, lifecycle hooks, and routes.
"""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn

from app.core.config import settings
from app.exceptions import InputError
from app.routes import health
from app.routes.article import router as article_router
from app.routes.proxy import router as proxy_router

# ---------------------------------------------------------------------------
# Logging Configuration
# ---------------------------------------------------------------------------

# Configure root logger with level from settings
logging.basicConfig(
    level=settings.get_log_level_int(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Lifecycle
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application startup / shutdown lifecycle."""
    # --- Startup ---
    logger.info(
        "Starting article-relay-service (env=%s, port=%d)",
        settings.service_env,
        settings.port,
    )
    logger.info(
        "Fetch budgets: article=%.1fs relay=%.1fs",
        settings.article_fetch_timeout,
        settings.relay_fetch_timeout,
    )

    yield

    # --- Shutdown ---
    logger.info("Shutting down article-relay-service")


# ---------------------------------------------------------------------------
# App instance
# ---------------------------------------------------------------------------

app = FastAPI(
    title="article-relay API",
    version="0.1.0",
    docs_url="/docs",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

# ---------------------------------------------------------------------------
# Middleware
# ---------------------------------------------------------------------------

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_logging_middleware(request: Request, call_next):
    """Log every request with method, path, status, and duration."""
    start = time.monotonic()
    response = await call_next(request)
    duration_ms = (time.monotonic() - start) * 1000
    logger.info(
        "%s %s -> %d (%.1fms)",
        request.method,
        request.url.path,
        response.status_code,
        duration_ms,
    )
    return response


# ---------------------------------------------------------------------------
# Exception handlers
# ---------------------------------------------------------------------------


@app.exception_handler(InputError)
async def input_error_handler(request: Request, exc: InputError) -> JSONResponse:
    """Reject missing or malformed target URLs with a flat JSON error."""
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=400, content={"error": str(exc)})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all handler that returns a structured JSON error."""
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"error": "An unexpected error occurred."},
    )


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------

# Health check at /health (no prefix)
app.include_router(health.router)

# Public routes at the root (/article/fetch, /proxy, /proxy/test)
app.include_router(article_router)
app.include_router(proxy_router)

# Same routes under the API prefix used by the import UI (/api/proxy, ...)
app.include_router(article_router, prefix=settings.api_prefix, include_in_schema=False)
app.include_router(proxy_router, prefix=settings.api_prefix, include_in_schema=False)


def run() -> None:
    """Serve the app with uvicorn on the configured bind address."""
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
