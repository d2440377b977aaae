"""Search API schemas and the response envelope."""

from decimal import Decimal
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

DataT = TypeVar("DataT")


class APIResponse(BaseModel, Generic[DataT]):
    """Envelope for every search response (success and failure)."""

    success: bool = True
    status_code: int = Field(default=200, description="HTTP status mirrored in the body")
    message: str = ""
    data: DataT | None = None
    errors: list[Any] = Field(default_factory=list)


class RoomTypeResponse(BaseModel):
    """Room type nested in a room."""

    room_type_id: int
    type_name: str
    accessibility_features: str
    description: str


class RoomResponse(BaseModel):
    """Single room hit with its room type."""

    room_id: int
    room_number: str
    price: Decimal
    bed_type: str
    view_type: str
    status: str
    room_type: RoomTypeResponse


class AmenityResponse(BaseModel):
    """Amenity of a room."""

    amenity_id: int
    name: str
    description: str


class RoomDetailsResponse(BaseModel):
    """Room with its amenities (empty list when none)."""

    room: RoomResponse
    amenities: list[AmenityResponse] = Field(default_factory=list)
