"""Service configuration constants — single source of truth for all env vars."""

import os

# Document root served by the listing middleware; relative paths resolve against the cwd
LISTING_ROOT = os.getenv("LISTING_ROOT", ".")

# Server binding — used by `python -m dirserve` / uvicorn
API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "8000"))

# CORS origins for the hosting app (comma-separated)
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000")
