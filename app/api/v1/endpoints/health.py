"""Health check endpoints used for liveness and readiness probes."""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from app.domain.exceptions import DataAccessException
from app.infrastructure.persistence.database import get_connection_factory
from app.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse()


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"description": "Data store unreachable", "model": ReadinessErrorResponse}},
)
async def readiness_check() -> ReadinessResponse | JSONResponse:
    """Return 200 when the data store answers SELECT 1; 503 otherwise.

    A missing DATABASE_URL also answers 503 so orchestrators do not route
    search traffic to an instance that cannot run queries.
    """
    factory = get_connection_factory()
    try:
        async with factory.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except DataAccessException as e:
        logger.warning("Readiness check failed: %s", e.message)
        return JSONResponse(
            status_code=503,
            content=ReadinessErrorResponse(message=e.message).model_dump(),
        )
    except SQLAlchemyError as e:
        logger.warning("Readiness check failed: %s", e)
        return JSONResponse(
            status_code=503,
            content=ReadinessErrorResponse(message=str(e)).model_dump(),
        )
    return ReadinessResponse()
