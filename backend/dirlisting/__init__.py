"""Directory listing middleware.

Modules:
- entries: directory enumeration and per-entry metadata
- classify: content type -> icon class
- sorting: query-string sort state and ordering
- render: listing page and redirect bodies
- middleware: ASGI middleware tying the above together
"""

from dirlisting.middleware import DirListingMiddleware

__all__ = ["DirListingMiddleware"]
