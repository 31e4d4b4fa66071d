"""
Directory listing server entrypoint.

Usage:
    python -m dirserve --root /srv/files --port 8000
"""

from __future__ import annotations

import argparse

import uvicorn

from dirlisting.config import API_HOST, API_PORT, LISTING_ROOT


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve HTML directory listings")
    parser.add_argument(
        "--root", default=LISTING_ROOT,
        help=f"Document root to list (default: {LISTING_ROOT})",
    )
    parser.add_argument(
        "--host", default=API_HOST,
        help=f"Bind address (default: {API_HOST})",
    )
    parser.add_argument(
        "--port", type=int, default=API_PORT,
        help=f"Bind port (default: {API_PORT})",
    )
    return parser.parse_args()


def main() -> int:
    args = parse_args()

    from dirserve.main import create_app

    uvicorn.run(create_app(args.root), host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
