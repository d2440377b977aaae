"""Application layer: interfaces, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (room search executor).
"""

from app.application.interfaces import IRoomSearchExecutor
from app.application.services.criteria_validator import CriteriaValidator
from app.application.use_cases.search import HotelSearchService

__all__ = [
    "CriteriaValidator",
    "HotelSearchService",
    "IRoomSearchExecutor",
]
