"""Room search repository: executes the named query of each search mode.

Each call acquires one connection from the ConnectionFactory, runs the
mode's statement with bound parameters, materialises the rows into plain
dicts, and releases the connection before returning. Driver and connection
errors become DataAccessException; nothing is retried.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection

from app.application.dtos.search import DetailRows
from app.domain.exceptions import DataAccessException
from app.infrastructure.persistence.queries import (
    GET_ROOM_DETAILS_WITH_AMENITIES_BY_ROOM_ID,
    QUERY_CATALOG,
    DetailQuery,
    NamedQuery,
)
from app.shared.telemetry.tracing import TracedOperation

if TYPE_CHECKING:
    from app.application.dtos.criteria import RoomDetailsCriteria, SearchCriteria
    from app.domain.enums import SearchMode
    from app.infrastructure.persistence.database import ConnectionFactory

logger = logging.getLogger(__name__)


def bind_parameters(query: NamedQuery, fields: Mapping[str, Any]) -> dict[str, Any]:
    """Build the bind-parameter dict of query from a criteria field map.

    Every declared parameter is bound (None when the field is absent). Blank
    strings of nullable parameters are sent as None.
    """
    params: dict[str, Any] = {}
    for param_name, field_name in query.parameters.items():
        value = fields.get(field_name)
        if param_name in query.nullable and isinstance(value, str) and not value.strip():
            value = None
        params[param_name] = value
    return params


class RoomSearchRepository:
    """Runs named room search queries; one connection per call."""

    def __init__(
        self,
        connection_factory: "ConnectionFactory",
        catalog: Mapping["SearchMode", NamedQuery] = QUERY_CATALOG,
        detail_query: DetailQuery = GET_ROOM_DETAILS_WITH_AMENITIES_BY_ROOM_ID,
    ) -> None:
        self.connection_factory = connection_factory
        self.catalog = catalog
        self.detail_query = detail_query

    async def fetch_rows(self, criteria: "SearchCriteria") -> list[dict[str, Any]]:
        """Run the named query of criteria.mode; rows in store order."""
        query = self.catalog.get(criteria.mode)
        if query is None:
            raise ValueError(f"No named query for search mode {criteria.mode.value!r}")
        params = bind_parameters(query, criteria.as_field_map())
        async with self.connection_factory.connect() as conn:
            return await self._run(conn, query, params)

    async def fetch_detail_rows(self, criteria: "RoomDetailsCriteria") -> DetailRows:
        """Room row first (read fully), then its amenity rows, on one connection.

        The amenity query is not issued when the room does not exist.
        """
        fields = criteria.as_field_map()
        primary_query = self.detail_query.primary
        secondary_query = self.detail_query.secondary
        async with self.connection_factory.connect() as conn:
            primary = await self._run(
                conn, primary_query, bind_parameters(primary_query, fields)
            )
            if not primary:
                return DetailRows(primary=[], secondary=[])
            secondary = await self._run(
                conn, secondary_query, bind_parameters(secondary_query, fields)
            )
        return DetailRows(primary=primary, secondary=secondary)

    async def _run(
        self,
        conn: AsyncConnection,
        query: NamedQuery,
        params: dict[str, Any],
    ) -> list[dict[str, Any]]:
        """Execute one named statement and materialise its rows as dicts."""
        async with TracedOperation(f"room_search.{query.name}", {"db.query.name": query.name}):
            try:
                result = await conn.execute(query.statement, params)
                rows = [dict(row) for row in result.mappings().all()]
            except (SQLAlchemyError, OSError) as e:
                logger.exception("Query %s failed", query.name)
                raise DataAccessException(query.name, str(e)) from e
        logger.debug("Query %s returned %d row(s)", query.name, len(rows))
        return rows
