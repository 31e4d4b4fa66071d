"""Directory listing ASGI middleware.

Sits in front of another ASGI app (usually a static file server). Requests
that resolve to a directory under ``root`` are answered here; everything
else is passed through untouched.

    app.add_middleware(DirListingMiddleware, root="/srv/files")
"""

from __future__ import annotations

import logging
import os
from enum import Enum
from typing import Optional, Tuple
from urllib.parse import quote

from starlette.concurrency import run_in_threadpool
from starlette.datastructures import Headers
from starlette.responses import HTMLResponse
from starlette.types import ASGIApp, Receive, Scope, Send

from dirlisting.config import LISTING_ROOT
from dirlisting.entries import PARENT_ENTRY, MimeLookup, guess_mime_type, read_entries
from dirlisting.render import render_listing, render_redirect
from dirlisting.settings import REDIRECT_MAX_AGE
from dirlisting.sorting import parse_sort_spec, sort_entries

logger = logging.getLogger(__name__)


class PathState(str, Enum):
    NOT_A_DIRECTORY = "not_a_directory"
    DIRECTORY_NO_TRAILING_SLASH = "directory_no_trailing_slash"
    DIRECTORY_WITH_TRAILING_SLASH = "directory_with_trailing_slash"


def route_path(scope: Scope) -> str:
    """Request path relative to the mount point (PATH_INFO)."""
    path = scope["path"]
    root_path = scope.get("root_path", "")
    if root_path and (path == root_path or path.startswith(root_path + "/")):
        return path[len(root_path):] or "/"
    return path


def resolve_path(root: str, path_info: str) -> Tuple[PathState, str]:
    """Map a request path onto the filesystem and classify it.

    Paths that normalize outside ``root`` never count as directories.
    Blocking; call through the threadpool from async code.
    """
    candidate = os.path.normpath(os.path.join(root, path_info.lstrip("/")))
    if os.path.commonpath([root, candidate]) != root:
        return PathState.NOT_A_DIRECTORY, candidate
    if not os.path.isdir(candidate):
        return PathState.NOT_A_DIRECTORY, candidate
    if path_info.endswith("/"):
        return PathState.DIRECTORY_WITH_TRAILING_SLASH, candidate
    return PathState.DIRECTORY_NO_TRAILING_SLASH, candidate


def redirect_location(scope: Scope) -> str:
    """Original request path plus "/", query string kept verbatim."""
    raw_path = scope.get("raw_path")
    if raw_path:
        # some servers leave the query on raw_path
        path = raw_path.split(b"?", 1)[0].decode("latin-1")
    else:
        path = quote(scope.get("root_path", "") + route_path(scope))
    location = path + "/"
    query_string = scope.get("query_string", b"")
    if query_string:
        location += "?" + query_string.decode("latin-1")
    return location


class DirListingMiddleware:
    """Serve HTML directory listings, delegate everything else.

    Args:
        app: Downstream ASGI app.
        root: Document root. Defaults to LISTING_ROOT (the current directory).
        mime_lookup: path -> content type or None, for the Type column.
    """

    def __init__(
        self,
        app: ASGIApp,
        root: Optional[str] = None,
        mime_lookup: MimeLookup = guess_mime_type,
    ) -> None:
        self.app = app
        self.root = os.path.abspath(root or LISTING_ROOT)
        self.mime_lookup = mime_lookup

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        path_info = route_path(scope)
        state, directory = await run_in_threadpool(resolve_path, self.root, path_info)

        if state is PathState.NOT_A_DIRECTORY:
            await self.app(scope, receive, send)
            return

        if state is PathState.DIRECTORY_NO_TRAILING_SLASH:
            location = redirect_location(scope)
            logger.info(f"Redirecting {path_info} -> {location}")
            response = HTMLResponse(
                render_redirect(location),
                status_code=301,
                headers={
                    "Location": location,
                    "Cache-Control": f"must-revalidate, max-age={REDIRECT_MAX_AGE}",
                },
                media_type="text/html; charset=UTF-8",
            )
            await response(scope, receive, send)
            return

        try:
            entries = await run_in_threadpool(read_entries, directory, path_info, self.mime_lookup)
        except PermissionError:
            logger.warning(f"Permission denied listing {directory}")
            raise

        sort = parse_sort_spec(scope.get("query_string", b"").decode("latin-1"))
        listing = [PARENT_ENTRY] + sort_entries(entries, sort)
        host = Headers(scope=scope).get("host", "")
        logger.info(f"Listing {path_info} ({len(entries)} entries, {sort.query()})")

        response = HTMLResponse(render_listing(path_info, listing, sort, host))
        await response(scope, receive, send)
