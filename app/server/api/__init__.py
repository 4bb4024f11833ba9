"""
API package for the app1 data service.

Feature routers live in sibling modules and are aggregated on `api_router`,
which the application factory mounts under the configured prefix
(``/api`` by default). `API_ROUTES` lists their endpoints relative to that
prefix.
"""

from __future__ import annotations

from fastapi import APIRouter

from app.server.api.data import ROUTES as DATA_ROUTES
from app.server.api.data import router as data_router

API_VERSION = "0.1.0"

api_router = APIRouter()
api_router.include_router(data_router)

API_ROUTES = DATA_ROUTES


def describe() -> str:
    """Return a short string describing the API surface."""
    paths = sorted({route.path for route in API_ROUTES})
    return f"{API_VERSION} ({', '.join(paths)})"


__all__ = ["API_ROUTES", "API_VERSION", "api_router", "describe"]
