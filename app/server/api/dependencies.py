"""
FastAPI dependencies shared by the API routers.
"""

from __future__ import annotations

import json
from typing import Any, Dict, NoReturn

from fastapi import Request
from starlette.datastructures import UploadFile

from app.config import AppSettings
from app.errors import MalformedBodyError
from app.server.api.clock import Clock, SystemClock

FORM_CONTENT_TYPES = frozenset(
    {"application/x-www-form-urlencoded", "multipart/form-data"}
)


def get_settings(request: Request) -> AppSettings:
    return request.app.state.settings


def get_clock(request: Request) -> Clock:
    """Return a wall clock in the timezone the application is configured for."""
    return SystemClock(get_settings(request).timestamp_tz)


async def read_body_mapping(request: Request) -> Dict[str, Any]:
    """
    Read the request body as a key/value mapping.

    Only the body is read; query parameters are never merged into the
    mapping. JSON bodies must decode to an object. Form bodies become a flat
    mapping where repeated keys keep their last value and uploads are
    reduced to their filename. An empty body always yields an empty mapping.

    Raises:
        MalformedBodyError: if the body is not valid JSON (including the
            non-standard NaN and Infinity tokens) or is not an object.
    """

    body = await request.body()
    if not body.strip():
        return {}

    content_type = request.headers.get("content-type", "")
    media_type = content_type.split(";", 1)[0].strip().lower()

    if media_type in FORM_CONTENT_TYPES:
        form = await request.form()
        return {
            key: value.filename if isinstance(value, UploadFile) else value
            for key, value in form.items()
        }

    try:
        payload = json.loads(body, parse_constant=_reject_constant)
    except ValueError as exc:
        raise MalformedBodyError(f"Request body is not valid JSON: {exc}") from exc

    if not isinstance(payload, dict):
        raise MalformedBodyError(
            f"Request body must be a JSON object, got {type(payload).__name__}"
        )
    return payload


def _reject_constant(token: str) -> NoReturn:
    raise ValueError(f"{token} is not valid JSON")


__all__ = ["FORM_CONTENT_TYPES", "get_clock", "get_settings", "read_body_mapping"]
