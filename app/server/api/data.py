"""
Sample data endpoints.

``GET /data`` lists the three seeded items and ``POST /data`` echoes the
caller's body back. Neither keeps any state between requests.
"""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends, status

from app.config import AppSettings
from app.observability.logging import get_logger
from app.server.api.clock import Clock, isoformat
from app.server.api.dependencies import get_clock, get_settings, read_body_mapping
from app.server.api.models import SAMPLE_DATA, DataListResponse, DataReceivedResponse
from app.server.routes import RouteDefinition

logger = get_logger(__name__)

router = APIRouter(tags=["data"])

DATA_PATH = "/data"

LIST_MESSAGE = "Data retrieved successfully"
RECEIVED_MESSAGE = "Data received successfully"

ROUTES = (
    RouteDefinition(path=DATA_PATH, method="GET", name="list_data", description="List sample data"),
    RouteDefinition(path=DATA_PATH, method="POST", name="receive_data", description="Echo posted data"),
)


def endpoint_label(method: str, settings: AppSettings) -> str:
    """Return the ``"<METHOD> <prefix>/data"`` label echoed in every envelope."""
    return f"{method} {settings.api_prefix}{DATA_PATH}"


@router.get(
    DATA_PATH,
    response_model=DataListResponse,
    status_code=status.HTTP_200_OK,
    summary=ROUTES[0].description,
)
async def list_data(
    settings: AppSettings = Depends(get_settings),
    clock: Clock = Depends(get_clock),
) -> DataListResponse:
    """Return the seeded sample items. Query parameters and body are ignored."""
    logger.info("data_listed", item_count=len(SAMPLE_DATA))
    return DataListResponse(
        app=settings.app_name,
        endpoint=endpoint_label("GET", settings),
        message=LIST_MESSAGE,
        data=list(SAMPLE_DATA),
        timestamp=isoformat(clock()),
    )


@router.post(
    DATA_PATH,
    response_model=DataReceivedResponse,
    status_code=status.HTTP_201_CREATED,
    summary=ROUTES[1].description,
)
async def receive_data(
    received: Dict[str, Any] = Depends(read_body_mapping),
    settings: AppSettings = Depends(get_settings),
    clock: Clock = Depends(get_clock),
) -> DataReceivedResponse:
    """Echo the request body back unchanged. Nothing is stored or forwarded."""
    logger.info("data_received", field_count=len(received))
    return DataReceivedResponse(
        app=settings.app_name,
        endpoint=endpoint_label("POST", settings),
        message=RECEIVED_MESSAGE,
        received_data=received,
        timestamp=isoformat(clock()),
    )


__all__ = ["router", "ROUTES", "DATA_PATH", "endpoint_label", "list_data", "receive_data"]
