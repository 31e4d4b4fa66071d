"""FastAPI Application Entry Point.

Configures the app, lifespan, CORS, the directory listing middleware and
the static file server it falls back to.
"""

from __future__ import annotations

import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from dirlisting import DirListingMiddleware
from dirlisting.config import CORS_ORIGINS, LISTING_ROOT
from dirlisting.logging_config import get_api_logger, get_listing_logger

logger = get_api_logger()


def create_app(root: Optional[str] = None) -> FastAPI:
    """Build the listing service for one document root.

    Directory requests are answered by DirListingMiddleware; file requests
    fall through to StaticFiles mounted at "/".
    """
    root = os.path.abspath(root or LISTING_ROOT)
    get_listing_logger()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Serving directory listings for {root}")
        yield

    app = FastAPI(title="Directory Listing", version="1.0.0", lifespan=lifespan)

    app.add_middleware(DirListingMiddleware, root=root)
    # Added last so it wraps the listing responses too
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in CORS_ORIGINS.split(",") if o.strip()],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():
        """Health check endpoint for container orchestration."""
        return {"status": "ok", "root": root}

    # Registered last so /health wins over a file called "health"
    app.mount("/", StaticFiles(directory=root), name="files")

    return app


app = create_app()
