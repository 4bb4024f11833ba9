"""
Route metadata for the app1 data API.

Routers declare their endpoints as `RouteDefinition` records next to the
handlers; the application factory resolves them against the mount prefix.
Keeping this registry in our own hands means the route listing never
depends on how the framework stores included routers.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Iterable


@dataclass(frozen=True)
class RouteDefinition:
    """Simple representation of a registered route."""

    path: str
    method: str = "GET"
    name: str = ""
    description: str = ""

    @property
    def key(self) -> str:
        return f"{self.method.upper()} {self.path}"

    def mounted_at(self, prefix: str) -> "RouteDefinition":
        """Return a copy of this route with ``prefix`` prepended to its path."""
        return replace(self, path=f"{prefix}{self.path}")


def build_registry(routes: Iterable[RouteDefinition], prefix: str = "") -> Dict[str, RouteDefinition]:
    """Key routes by ``"<METHOD> <path>"`` after mounting them at ``prefix``."""
    registry: Dict[str, RouteDefinition] = {}
    for route in routes:
        mounted = route.mounted_at(prefix)
        registry[mounted.key] = mounted
    return registry


__all__ = ["RouteDefinition", "build_registry"]
