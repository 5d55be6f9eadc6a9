"""Domain error classes.

Protocol-agnostic errors that represent business failures.
Protocol adapters (HTTP today) translate them into their own formats.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Carries a message, a machine-readable error code and free-form context
    that adapters can use when rendering the error.
    """

    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message
            **context: Additional context for the error (field names, values)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for protocol translation."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """Business rule validation error.

    Examples:
        - vehicle_id is not a positive integer
        - year outside the accepted range

    Protocol mappings:
        - REST: 422 Unprocessable Entity
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Overall validation error message (optional if errors provided)
            errors: Field-specific errors, each with 'field' and 'message'
                   Example: [{"field": "vehicle_id", "message": "Must be positive"}]
            **context: Additional context
        """
        self.errors: list[dict[str, str]] | None
        if errors:
            self.errors = errors
            msg = message or "Validation failed"
        else:
            self.errors = None
            msg = message or "Validation error"

        super().__init__(msg, **context)

    def to_dict(self) -> dict[str, Any]:
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class NotFoundError(DomainError):
    """Resource not found.

    Protocol mappings:
        - REST: 404 Not Found
    """

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None, **context: Any) -> None:
        """Create a not found error.

        Args:
            resource: Type of resource (e.g., "Vehicle")
            identifier: Resource identifier
            **context: Additional context
        """
        if identifier:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"

        super().__init__(message, resource=resource, identifier=identifier, **context)


class QueryFailedError(DomainError):
    """The underlying storage failed while counting or fetching records.

    The originating exception is kept in ``cause`` and is also chained as
    ``__cause__`` by the code that raises this error.

    Protocol mappings:
        - REST: 503 Service Unavailable
    """

    error_code: str = "QUERY_FAILED"

    def __init__(
        self,
        message: str = "Vehicle query failed",
        cause: BaseException | None = None,
        **context: Any,
    ) -> None:
        self.cause = cause
        super().__init__(message, **context)
