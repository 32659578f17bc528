"""Catalog exceptions.

Errors raised by the catalog and seed services. The HTTP layer maps
each class to a status code and a machine-readable error code.
"""

from typing import Any

GENERIC_ERROR_MESSAGE = "Unexpected error, check server logs"


class CatalogError(Exception):
    """Base class for all catalog exceptions.

    Attributes:
        message: Human-readable error message.
        details: Additional error context.
    """

    error_code = "CATALOG_ERROR"
    status_code = 500

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize catalog error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ProductNotFoundError(CatalogError):
    """Raised when no product matches an id or search term."""

    error_code = "PRODUCT_NOT_FOUND"
    status_code = 404

    def __init__(self, term: str) -> None:
        """Initialize product not found error.

        Args:
            term: The id, title or slug that was looked up.
        """
        super().__init__(
            f"Product with term '{term}' not found",
            details={"term": term},
        )


class DuplicateKeyError(CatalogError):
    """Raised when a write violates a uniqueness constraint."""

    error_code = "DUPLICATE_KEY"
    status_code = 400

    def __init__(self, detail: str) -> None:
        """Initialize duplicate key error.

        Args:
            detail: Conflict detail reported by the database.
        """
        super().__init__(detail, details={"detail": detail})


class InternalServiceError(CatalogError):
    """Raised in place of unexpected storage failures.

    Carries no detail about the original error; that is logged instead.
    """

    error_code = "INTERNAL_ERROR"

    def __init__(self, message: str = GENERIC_ERROR_MESSAGE) -> None:
        super().__init__(message)


class SeedError(CatalogError):
    """Raised when one or more seed inserts failed."""

    error_code = "SEED_FAILED"

    def __init__(self, failures: dict[str, str]) -> None:
        """Initialize seed error.

        Args:
            failures: Failed product titles mapped to their error messages.
        """
        super().__init__(
            f"{len(failures)} seed product(s) failed to insert",
            details={"failures": failures},
        )
        self.failures = failures
