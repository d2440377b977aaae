"""DTOs for room search results (no dependency on ORM).

Immutable snapshots built per request from query rows and discarded after
serialization.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any


@dataclass(frozen=True)
class RoomTypeInfo:
    """Room type embedded by value in a room result."""

    room_type_id: int
    type_name: str
    accessibility_features: str
    description: str


@dataclass(frozen=True)
class RoomResult:
    """Single room hit with its room type (read-model)."""

    room_id: int
    room_number: str
    price: Decimal
    bed_type: str
    view_type: str
    status: str
    room_type: RoomTypeInfo


@dataclass(frozen=True)
class AmenityResult:
    """Amenity attached to a room through the room/amenity join."""

    amenity_id: int
    name: str
    description: str


@dataclass(frozen=True)
class RoomWithAmenities:
    """Room detail read-model: the room plus its amenities (empty tuple when none)."""

    room: RoomResult
    amenities: tuple[AmenityResult, ...] = ()


@dataclass(frozen=True)
class DetailRows:
    """Raw rows of the room-detail query, consumed primary first.

    primary holds at most one room row; secondary holds the room's amenity rows.
    """

    primary: list[dict[str, Any]] = field(default_factory=list)
    secondary: list[dict[str, Any]] = field(default_factory=list)
