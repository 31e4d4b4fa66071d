"""Listing runtime settings — tunable parameters for rendered responses.

All values read from environment variables with defaults matching the
classic Apache-style listing output. Import from here instead of hardcoding.

Infrastructure config (document root, API host/port) stays in
dirlisting/config.py.
"""

from __future__ import annotations

import os


def _int(key: str, default: int) -> int:
    return int(os.getenv(key, str(default)))


def _str(key: str, default: str) -> str:
    return os.getenv(key, default)


# =====================================================================
# Redirects (missing trailing slash)
# =====================================================================

# Cache-Control max-age for the 301 that appends the trailing slash (seconds)
REDIRECT_MAX_AGE = _int("REDIRECT_MAX_AGE", 3600)


# =====================================================================
# Entries
# =====================================================================

# Content type reported for files the MIME table does not know
DEFAULT_CONTENT_TYPE = _str("DEFAULT_CONTENT_TYPE", "text/plain")

# strftime pattern for the Last Modified column (local time)
MTIME_FORMAT = _str("MTIME_FORMAT", "%d-%b-%Y %H:%M")
