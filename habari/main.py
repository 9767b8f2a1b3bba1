"""
Habari

Personal portfolio and blog: server-rendered pages plus a small JSON API.
"""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from habari.config import get_settings
from habari.middleware import RequestIDMiddleware, SecurityHeadersMiddleware
from habari.routers import pages, posts
from habari.services.site_data import SITE_FILE, PROJECTS_FILE

logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: startup and shutdown."""
    logger.info(
        "Serving content from %s (%s)", settings.content_dir, settings.environment
    )
    yield


app = FastAPI(
    title="Habari",
    description="Personal portfolio and blog",
    version="0.1.0",
    lifespan=lifespan,
)

# Request IDs and security headers
app.add_middleware(RequestIDMiddleware)
app.add_middleware(SecurityHeadersMiddleware)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["Content-Type", "X-Request-ID"],
)

# Routers
app.include_router(posts.router, prefix="/api")
app.include_router(pages.router)

if settings.static_dir.is_dir():
    app.mount("/static", StaticFiles(directory=settings.static_dir), name="static")


def _run_health_checks() -> dict[str, Any]:
    """Check that the content and data files are where settings say."""
    s = get_settings()
    checks = {
        "content": "ok" if s.content_dir.is_dir() else "fail",
        "site_data": "ok" if (s.data_dir / SITE_FILE).is_file() else "fail",
        "projects": "ok" if (s.data_dir / PROJECTS_FILE).is_file() else "fail",
    }
    failed = [k for k, v in checks.items() if v != "ok"]
    if failed:
        logger.warning("Health check degraded: failed: %s", ", ".join(failed))

    return {
        "status": "degraded" if failed else "ok",
        "service": "habari",
        "version": "0.1.0",
        "checks": checks,
    }


@app.get("/api/health")
def health_check() -> JSONResponse:
    """Health check verifying content and data are reachable."""
    return JSONResponse(content=_run_health_checks())
