"""Directory enumeration for listing responses.

Reads one directory, stats every child and builds the request-relative URL
for each of them. Everything here is blocking filesystem I/O; the middleware
runs it in the threadpool.
"""

from __future__ import annotations

import logging
import mimetypes
import os
import stat
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, List, Optional
from urllib.parse import quote

from dirlisting.classify import DIRECTORY_TYPE, IconClass, icon_class
from dirlisting.settings import DEFAULT_CONTENT_TYPE, MTIME_FORMAT

logger = logging.getLogger(__name__)

MimeLookup = Callable[[str], Optional[str]]


@dataclass(frozen=True)
class Entry:
    """One row of a directory listing."""
    display_name: str  # "/" appended for directories
    url: str  # percent-encoded, request-relative
    is_directory: bool
    content_type: str  # "directory" sentinel for directories
    size: Optional[int]  # None on the parent row
    mtime_raw: int  # epoch seconds, used for sorting
    mtime_formatted: str
    icon_class: IconClass


PARENT_ENTRY = Entry(
    display_name="Parent Directory",
    url="../",
    is_directory=True,
    content_type="",
    size=None,
    mtime_raw=0,
    mtime_formatted="",
    icon_class=IconClass.PARENT,
)


def guess_mime_type(path: str) -> Optional[str]:
    """Default MIME lookup (same table Starlette's StaticFiles uses)."""
    return mimetypes.guess_type(path)[0]


def format_mtime(epoch: int) -> str:
    return datetime.fromtimestamp(epoch).strftime(MTIME_FORMAT)


def encode_url(path: str) -> str:
    """Percent-encode each path segment on its own, keeping the separators.

    Segments go through os.fsencode so undecodable filename bytes come out
    as the same bytes the filesystem holds.
    """
    return "/".join(quote(os.fsencode(segment), safe="") for segment in path.split("/"))


def display_text(name: str) -> str:
    """Filename as printable text; undecodable bytes become U+FFFD."""
    return name.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def read_entries(
    directory: str,
    path_info: str,
    mime_lookup: MimeLookup = guess_mime_type,
) -> List[Entry]:
    """List the children of ``directory`` in enumeration order.

    Args:
        directory: Filesystem path of the directory to read.
        path_info: Request path of that directory, ending in "/".
        mime_lookup: path -> content type or None.

    Returns:
        Unsorted entries, without the parent row.

    Raises:
        OSError: If the directory itself cannot be read. Children that
            disappear before they can be stat'ed are skipped instead.
    """
    entries: List[Entry] = []

    with os.scandir(directory) as it:
        for item in it:
            # scandir never yields them, other listers might
            if item.name in (".", ".."):
                continue

            try:
                st = os.stat(item.path)
            except FileNotFoundError:
                logger.debug(f"Skipping vanished entry {item.path}")
                continue

            is_dir = stat.S_ISDIR(st.st_mode)
            name = display_text(item.name)
            url = encode_url(path_info + item.name)
            if is_dir:
                name += "/"
                url += "/"
                content_type = DIRECTORY_TYPE
            else:
                content_type = mime_lookup(item.path) or DEFAULT_CONTENT_TYPE

            mtime = int(st.st_mtime)
            entries.append(Entry(
                display_name=name,
                url=url,
                is_directory=is_dir,
                content_type=content_type,
                size=st.st_size,
                mtime_raw=mtime,
                mtime_formatted=format_mtime(mtime),
                icon_class=icon_class(content_type),
            ))

    return entries
