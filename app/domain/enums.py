"""Domain enumerations for the hotel search service.

Enums represent fixed sets of domain values (e.g. search mode).
"""

from enum import Enum


class SearchMode(str, Enum):
    """Search mode: the fixed filter shape of a search request.

    Each mode has exactly one criteria type and one named query.
    """

    AVAILABILITY = "availability"
    PRICE_RANGE = "price_range"
    ROOM_TYPE = "room_type"
    VIEW_TYPE = "view_type"
    AMENITY = "amenity"
    ROOM_TYPE_ID = "room_type_id"
    ROOM_DETAILS = "room_details"
    ROOM_AMENITIES = "room_amenities"
    MIN_RATING = "min_rating"
    CUSTOM = "custom"
