"""
Clock used to stamp responses.

Handlers receive the clock as a FastAPI dependency (see
``app.server.api.dependencies.get_clock``), so tests can swap in a fixed
clock through ``app.dependency_overrides``.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], datetime]


class SystemClock:
    """Wall clock in UTC, or in the host's local zone when ``tz="local"``."""

    def __init__(self, tz: str = "utc"):
        self.tz = tz

    def __call__(self) -> datetime:
        if self.tz == "local":
            return datetime.now().astimezone()
        return datetime.now(timezone.utc)


def isoformat(moment: datetime) -> str:
    """Render a timestamp as ISO 8601 with second precision and UTC offset."""
    if moment.tzinfo is None:
        moment = moment.astimezone()
    return moment.isoformat(timespec="seconds")


__all__ = ["Clock", "SystemClock", "isoformat"]
