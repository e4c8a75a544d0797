class ShopError(Exception):
    """Base class for failures the HTTP layer maps to a status code."""

    status_code = 500
    public_message = "An unexpected error occurred. Please try again later."

    def __init__(self, message=None):
        super().__init__(message or self.public_message)
        self.message = message or self.public_message


class NotFound(ShopError):
    status_code = 404
    public_message = "Resource not found"


class EmptyCart(ShopError):
    status_code = 400
    public_message = "Cart is empty"


class ValidationError(ShopError):
    status_code = 400
    public_message = "Invalid request"

    def __init__(self, message=None, details=None):
        super().__init__(message)
        self.details = details or []


class StoreError(ShopError):
    """The relational store failed; the cause stays in the server log."""

    status_code = 500


__all__ = [
    "ShopError",
    "NotFound",
    "EmptyCart",
    "ValidationError",
    "StoreError",
]
