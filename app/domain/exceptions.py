"""Domain exceptions for the hotel search service.

Defines the error taxonomy of the search core. These exceptions are
independent of infrastructure concerns. Presentation layer maps them to
HTTP responses in exception handlers.

"No rows matched" is not an error: use cases return an empty list (or None
for single-result lookups) and leave the decision to the caller.
"""

from typing import Any


class HotelSearchException(Exception):
    """Base exception for all hotel search errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, query name).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable representation (error, message, details)."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class SearchValidationException(HotelSearchException):
    """Raised when search criteria violate one or more field or cross-field rules.

    Carries every violation found, not just the first, so the caller can
    report them together. No query has been issued when this is raised.
    """

    def __init__(
        self,
        violations: list[dict[str, str]],
        message: str = "Invalid search criteria",
    ) -> None:
        """Initialize with the collected violations.

        Args:
            violations: One {"field": ..., "message": ...} dict per violation.
            message: Summary message for the whole rejection.
        """
        self.violations = violations
        super().__init__(message, "VALIDATION_ERROR", {"violations": violations})


class DataAccessException(HotelSearchException):
    """Raised when the data store fails (connectivity, timeout, driver error).

    Never retried inside the service; surfaced to the caller as-is.
    """

    def __init__(
        self, query_name: str, reason: str, message: str | None = None
    ) -> None:
        """Initialize with the query that failed and the underlying reason.

        Args:
            query_name: Named query (or "connect") that was running.
            reason: Text of the underlying driver or connection error.
            message: Optional override for the default message.
        """
        super().__init__(
            message or f"Data store error while running {query_name}",
            "DATA_ACCESS_ERROR",
            {"query": query_name, "reason": reason},
        )


class DatabaseNotConfiguredException(DataAccessException):
    """Raised when a search needs the database but DATABASE_URL is not set."""

    def __init__(self) -> None:
        super().__init__(
            "connect",
            "DATABASE_URL is not configured",
            message="This operation requires a SQL database that is not configured.",
        )


class MappingException(HotelSearchException):
    """Raised when a result row does not satisfy the required-column contract.

    Fatal for the operation: no partial result is returned.
    """

    def __init__(self, column: str, reason: str) -> None:
        """Initialize with the offending column and reason.

        Args:
            column: Column name that was missing or malformed.
            reason: Short description (e.g. 'missing', 'expected int').
        """
        super().__init__(
            f"Invalid result row: column {column} {reason}",
            "MAPPING_ERROR",
            {"column": column, "reason": reason},
        )
