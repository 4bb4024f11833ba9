"""
Response models for the data endpoints.

Both endpoints answer with the same envelope shape; only the payload field
differs (`data` for listings, `received_data` for echoes).
"""

from __future__ import annotations

from typing import Any, Dict, List, Tuple

from pydantic import BaseModel, ConfigDict, Field


class DataItem(BaseModel):
    """A seeded sample record. Ids are unique and never change."""

    id: int
    value: str

    model_config = ConfigDict(frozen=True)


SAMPLE_DATA: Tuple[DataItem, ...] = (
    DataItem(id=1, value="Sample data 1"),
    DataItem(id=2, value="Sample data 2"),
    DataItem(id=3, value="Sample data 3"),
)


class ResponseEnvelope(BaseModel):
    """Fields shared by every data endpoint response."""

    app: str = Field(..., description="Application identifier")
    endpoint: str = Field(..., description="Method and path that produced the response")
    message: str = Field(..., description="Human-readable outcome")
    timestamp: str = Field(..., description="ISO 8601 time the response was built")


class DataListResponse(ResponseEnvelope):
    data: List[DataItem]


class DataReceivedResponse(ResponseEnvelope):
    received_data: Dict[str, Any] = Field(
        default_factory=dict,
        description="Request body exactly as the caller sent it",
    )


__all__ = [
    "DataItem",
    "SAMPLE_DATA",
    "ResponseEnvelope",
    "DataListResponse",
    "DataReceivedResponse",
]
