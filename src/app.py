"""Storefront FastAPI application.

Single-domain web server that processes commands synchronously via HTTP.
Every request runs inside the storefront domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# Routers are imported (via storefront.web) before init() so every command
# and handler module is registered. PROTEAN_ENV selects the config overlay
# ("production" switches to SQLite).
from storefront.domain import storefront
from storefront.web import create_app

storefront.init()

app = create_app()
