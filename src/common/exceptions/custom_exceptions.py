"""Custom application-wide exceptions.

Each error carries the HTTP-style status the JSON layer answers with, so
callers can turn any of them into an ``{"error": ...}`` body.
"""


class ApplicationError(Exception):
    """Base class for application-specific errors."""

    status_code: int = 500

    def __init__(
        self, message: str = "An application error occurred", original_exception: Exception | None = None
    ) -> None:
        super().__init__(message)
        self.original_exception = original_exception
        self.message = message

    def __str__(self) -> str:
        if self.original_exception:
            return f"{self.message} (Original error: {self.original_exception})"
        return self.message

    def to_response(self) -> dict:
        return {"error": str(self)}


class DatabaseError(ApplicationError):
    """Exception raised for errors during database operations."""

    def __init__(self, message: str = "Database operation failed", original_exception: Exception | None = None) -> None:
        super().__init__(message, original_exception)
        self.message = f"Database Error: {message}"


class InvalidRequestError(ApplicationError):
    """The submitted payload holds nothing that can be applied."""

    status_code = 400


class InvalidOrderError(InvalidRequestError):
    """Raised when an order request carries no usable items."""


class InvalidCatalogDataError(InvalidRequestError):
    """Raised for product or category payloads missing required fields."""


class CategoryNotFoundError(ApplicationError):
    status_code = 404

    def __init__(self, category_id: str) -> None:
        super().__init__(f"Category not found: {category_id}")
        self.category_id = category_id
