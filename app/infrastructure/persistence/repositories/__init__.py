"""Persistence repositories. Re-exports for dependency injection."""

from app.infrastructure.persistence.repositories.room_search_repo import (
    RoomSearchRepository,
    bind_parameters,
)

__all__ = [
    "RoomSearchRepository",
    "bind_parameters",
]
