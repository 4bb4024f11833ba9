"""
Server wiring for the app1 data API.

`create_app()` builds the FastAPI application: the data router under the
configured prefix, request middleware, JSON error handlers and the small
operational surface (``/``, ``/healthz``, ``/metrics``).

Route metadata is also kept as plain `RouteDefinition` records on
``app.state.routes`` so the root endpoint, the request metrics and the tests
can introspect which endpoints exist without poking at framework internals.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, AsyncIterator, Dict, Optional

from fastapi import FastAPI, Response

from app import __version__
from app.config import AppSettings, load_config
from app.errors import register_exception_handlers
from app.observability.logging import get_logger
from app.observability.metrics import get_metrics_content_type, get_metrics_output
from app.observability.middleware import RequestContextMiddleware
from app.server.api import API_ROUTES, api_router
from app.server.routes import RouteDefinition, build_registry

logger = get_logger(__name__)

SERVICE_ROUTES = (
    RouteDefinition(path="/", method="GET", name="root", description="Service information"),
    RouteDefinition(path="/healthz", method="GET", name="healthz", description="Health check"),
)


def describe_routes(app: FastAPI) -> Dict[str, RouteDefinition]:
    """Return the application's public routes keyed by ``"<METHOD> <path>"``."""
    return dict(app.state.routes)


def create_app(settings: Optional[AppSettings] = None) -> FastAPI:
    """
    Factory that returns a fully wired FastAPI application.

    Args:
        settings: Pre-resolved settings; `load_config()` is used when omitted.
    """

    settings = settings or load_config()
    started_at = datetime.now(timezone.utc)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "server_started",
            app_name=settings.app_name,
            api_prefix=settings.api_prefix,
            metrics_enabled=settings.metrics_enabled,
        )
        yield
        logger.info("server_shutdown", app_name=settings.app_name)

    app = FastAPI(
        title=f"{settings.app_name} data API",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.routes = {
        **build_registry(SERVICE_ROUTES),
        **build_registry(API_ROUTES, prefix=settings.api_prefix),
    }

    app.include_router(api_router, prefix=settings.api_prefix)
    app.add_middleware(RequestContextMiddleware, record_metrics=settings.metrics_enabled)
    register_exception_handlers(app)

    @app.get("/", summary="Service information")
    async def root() -> Dict[str, Any]:
        return {
            "service": settings.app_name,
            "version": __version__,
            "endpoints": sorted(describe_routes(app)),
        }

    @app.get("/healthz", summary="Health check")
    async def healthz() -> Dict[str, Any]:
        return {
            "status": "ok",
            "app": settings.app_name,
            "uptime_seconds": (datetime.now(timezone.utc) - started_at).total_seconds(),
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    if settings.metrics_enabled:

        @app.get("/metrics", include_in_schema=False)
        async def metrics() -> Response:
            return Response(
                content=get_metrics_output(),
                media_type=get_metrics_content_type(),
            )

    return app


__all__ = ["RouteDefinition", "SERVICE_ROUTES", "create_app", "describe_routes"]
