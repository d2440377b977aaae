"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.enums import SearchMode
from app.domain.exceptions import (
    DataAccessException,
    DatabaseNotConfiguredException,
    HotelSearchException,
    MappingException,
    SearchValidationException,
)

__all__ = [
    # Enums
    "SearchMode",
    # Exceptions
    "DataAccessException",
    "DatabaseNotConfiguredException",
    "HotelSearchException",
    "MappingException",
    "SearchValidationException",
]
