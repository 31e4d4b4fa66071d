"""Root conftest for listing tests.

Provides:
- A populated document root on tmp_path with fixed mtimes
- A bare middleware stack with a recording downstream app
- An httpx AsyncClient for the bare stack and for the full FastAPI app
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi import FastAPI, Request
from httpx import ASGITransport, AsyncClient

from dirlisting import DirListingMiddleware
from dirserve.main import create_app


# ---------------------------------------------------------------------------
# Document root
# ---------------------------------------------------------------------------

# name -> (content, mtime)
ROOT_FILES = {
    "alpha.txt": (b"a" * 100, 1_600_000_300),
    "bravo.txt": (b"b" * 20, 1_600_000_100),
    "charlie.txt": (b"c" * 50, 1_600_000_200),
}


@pytest.fixture
def listing_root(tmp_path: Path) -> Path:
    """Document root with three text files and one subdirectory.

    alpha.txt   100 bytes, newest
    bravo.txt    20 bytes, oldest
    charlie.txt  50 bytes
    subdir/      holds inner.html
    """
    for name, (content, mtime) in ROOT_FILES.items():
        path = tmp_path / name
        path.write_bytes(content)
        os.utime(path, (mtime, mtime))

    subdir = tmp_path / "subdir"
    subdir.mkdir()
    (subdir / "inner.html").write_text("<p>inner</p>", encoding="utf-8")
    os.utime(subdir, (1_600_000_000, 1_600_000_000))
    return tmp_path


# ---------------------------------------------------------------------------
# Bare middleware stack — downstream echoes the path it received
# ---------------------------------------------------------------------------

def make_downstream() -> FastAPI:
    downstream = FastAPI()

    @downstream.api_route("/{path:path}", methods=["GET", "HEAD", "POST"])
    async def echo(path: str, request: Request):
        return {"downstream": True, "path": request.url.path}

    return downstream


@pytest_asyncio.fixture
async def client(listing_root: Path) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client for DirListingMiddleware over the echo app."""
    app = DirListingMiddleware(make_downstream(), root=str(listing_root))
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def app_client(listing_root: Path) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client for the full FastAPI service (5xx returned, not raised)."""
    transport = ASGITransport(app=create_app(str(listing_root)), raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
