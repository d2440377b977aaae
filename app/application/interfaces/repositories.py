"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.application.dtos.criteria import RoomDetailsCriteria, SearchCriteria
    from app.application.dtos.search import DetailRows


class IRoomSearchExecutor(Protocol):
    """Protocol for the room search query executor (DIP)."""

    async def fetch_rows(self, criteria: SearchCriteria) -> list[dict[str, Any]]:
        """Run the named query of criteria.mode and return its rows in store order."""

    async def fetch_detail_rows(self, criteria: RoomDetailsCriteria) -> DetailRows:
        """Run the room-detail query pair: room row first, then its amenity rows."""
