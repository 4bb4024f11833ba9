"""
app1 data API.

* `app/server/` - FastAPI application factory, entrypoint and API routers.
* `app/config/` - Settings resolution (arguments, environment, TOML).
* `app/observability/` - Structured logging, request metrics and middleware.
"""

__version__ = "0.1.0"
