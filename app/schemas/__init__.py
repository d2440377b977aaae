"""Pydantic request/response schemas for the API."""

from app.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)
from app.schemas.search import (
    AmenityResponse,
    APIResponse,
    RoomDetailsResponse,
    RoomResponse,
    RoomTypeResponse,
)

__all__ = [
    "APIResponse",
    "AmenityResponse",
    "HealthResponse",
    "ReadinessErrorResponse",
    "ReadinessResponse",
    "RoomDetailsResponse",
    "RoomResponse",
    "RoomTypeResponse",
]
