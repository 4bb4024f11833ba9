"""
Entrypoint for the app1 data API.

`bootstrap()` resolves configuration, configures logging and returns the
application without creating framework globals at import time, so process
managers can use the factory form::

    uvicorn app.server.main:bootstrap --factory

Running the module directly (or the ``app1-serve`` script) starts uvicorn
with the configured host and port.
"""

from __future__ import annotations

from typing import Optional

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI

from app.config import AppSettings, load_config
from app.observability.logging import configure_logging
from app.server import create_app


def bootstrap(settings: Optional[AppSettings] = None) -> FastAPI:
    """Return a configured application instance."""

    load_dotenv()
    settings = settings or load_config()
    configure_logging(level=settings.log_level, format=settings.log_format)
    return create_app(settings)


def run() -> None:
    """Serve the application with uvicorn."""

    application = bootstrap()
    settings: AppSettings = application.state.settings
    uvicorn.run(
        application,
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    run()
