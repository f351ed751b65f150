"""Custom exception classes for the product catalog service."""

from typing import Any

from core.utils.constants import (
    ERROR_CODE_INVALID_FILTER,
    ERROR_CODE_STORE_READ_FAILED,
)


class ProductServiceError(Exception):
    """
    Base exception for all product catalog errors.

    All custom errors must inherit from this class.
    Callers must explicitly provide a message and error code.
    Optional contextual information can be supplied via `details`.
    """

    message: str
    error_code: str
    details: dict[str, Any]

    def __init__(
        self,
        *,
        message: str,
        error_code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}

        super().__init__(self.message)


class InvalidFilterValueError(ProductServiceError):
    """Raised when a query filter value is outside its allowed set.

    The message defaults to ``"Invalid <field>"``, which is returned to the
    client verbatim.
    """

    field: str

    def __init__(
        self,
        *,
        field: str,
        message: str | None = None,
        error_code: str = ERROR_CODE_INVALID_FILTER,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.field = field

        super().__init__(
            message=message or f"Invalid {field}",
            error_code=error_code,
            details={"field": field, **(details or {})},
        )


class StoreError(ProductServiceError):
    """Raised when the catalog store cannot be read."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_STORE_READ_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )
