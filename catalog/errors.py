"""
Error taxonomy and shared error messages.

Repositories raise these; only the HTTP layer turns them into status codes.
"""

# Product errors
ERROR_PRODUCT_NOT_FOUND = "Product not found"

# Review errors
ERROR_REVIEW_NOT_FOUND = "Review not found"

# User errors
ERROR_USER_NOT_FOUND = "User not found"
ERROR_UNAUTHORIZED = "Unauthorized. Please log in with GitHub to access this resource."

# Generic errors
ERROR_VALIDATION = "Validation error"
ERROR_INVALID_ID = "Invalid id"
ERROR_NOT_FOUND = "Not found"
ERROR_STORE = "Store operation failed"
ERROR_DUPLICATE = "Record already exists"
ERROR_NO_FIELDS = "at least one field must be provided"
ERROR_PAYLOAD_NOT_OBJECT = "payload must be an object"


class CatalogError(Exception):
    """Base class for every classified catalog failure."""

    message: str = ERROR_STORE

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.message
        super().__init__(self.message)


class ValidationError(CatalogError):
    """Input failed schema validation. Carries every violation, not just the first."""

    message = ERROR_VALIDATION

    def __init__(self, details: list[str]) -> None:
        self.details = list(details)
        super().__init__(f"{ERROR_VALIDATION}: {'; '.join(self.details)}")


class InvalidIdError(CatalogError):
    """An identifier token could not be parsed into the store's id type."""

    message = ERROR_INVALID_ID

    def __init__(self, value: object = None) -> None:
        self.value = value
        super().__init__(ERROR_INVALID_ID)


class NotFoundError(CatalogError):
    """A well-formed lookup matched nothing. Callers decide how severe that is."""

    message = ERROR_NOT_FOUND


class StoreError(CatalogError):
    """The store could not be reached or rejected the operation."""

    message = ERROR_STORE

    def __init__(self, message: str | None = None, code: str | None = None) -> None:
        self.code = code
        super().__init__(message)


class DuplicateError(StoreError):
    """A write hit a unique constraint."""

    message = ERROR_DUPLICATE

    def __init__(self, field: str | None = None, code: str | None = "23505") -> None:
        self.field = field
        text = f"{ERROR_DUPLICATE}: {field}" if field else ERROR_DUPLICATE
        super().__init__(text, code=code)


__all__ = [
    "CatalogError",
    "ValidationError",
    "InvalidIdError",
    "NotFoundError",
    "StoreError",
    "DuplicateError",
]
