"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the connection factory and the search use case.
Routes depend only on these dependencies, not on infrastructure directly.
Tests override get_hotel_search_service via app.dependency_overrides.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from app.application.use_cases.search import HotelSearchService
from app.infrastructure.persistence.database import (
    ConnectionFactory,
    get_connection_factory,
)
from app.infrastructure.persistence.repositories import RoomSearchRepository


async def get_room_search_repo(
    connection_factory: Annotated[ConnectionFactory, Depends(get_connection_factory)],
) -> RoomSearchRepository:
    """Room search repository (one connection per query, read-only)."""
    return RoomSearchRepository(connection_factory)


async def get_hotel_search_service(
    search_repo: Annotated[RoomSearchRepository, Depends(get_room_search_repo)],
) -> HotelSearchService:
    """Hotel search use case (validation, named queries, row mapping)."""
    return HotelSearchService(search_repo)
