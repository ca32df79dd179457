"""Domain errors raised by the catalog services."""
from enum import Enum
from typing import Any, Optional


class ErrorCode(Enum):
    """Domain error codes, also used as the `error` field of error responses."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    UNAUTHORIZED = "UNAUTHORIZED"
    STORE_ERROR = "STORE_ERROR"


class CatalogError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode = ErrorCode.STORE_ERROR
    status_code: int = 500

    def __init__(self, message: str, details: Optional[list[dict[str, Any]]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or []

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"error": self.code.value, "message": self.message}
        if self.details:
            body["details"] = self.details
        return body


class ValidationError(CatalogError):
    """Malformed or out-of-range input. Raised before the store is touched."""

    code = ErrorCode.VALIDATION_ERROR
    status_code = 400


class NotFoundError(CatalogError):
    """Referenced id or slug does not exist."""

    code = ErrorCode.NOT_FOUND
    status_code = 404

    def __init__(self, entity: str, key: Any) -> None:
        super().__init__(f"{entity} not found")
        self.entity = entity
        self.key = key


class UnauthorizedError(CatalogError):
    code = ErrorCode.UNAUTHORIZED
    status_code = 401

    def __init__(self) -> None:
        super().__init__("Missing or invalid admin key")


class StoreError(CatalogError):
    """Persistence failure. The message never carries driver detail."""

    code = ErrorCode.STORE_ERROR
    status_code = 500

    def __init__(self) -> None:
        super().__init__("Internal server error")
