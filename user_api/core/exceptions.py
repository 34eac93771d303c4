# user_api/core/exceptions.py

from __future__ import annotations


class AppError(Exception):
    def __init__(self, message: str, *, status_code: int = 400) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class BadRequestError(AppError):
    def __init__(self, message: str = "Bad request") -> None:
        super().__init__(message, status_code=400)


class ValidationFailedError(AppError):
    """Structural field errors: one message per field name."""

    def __init__(
        self,
        details: dict[str, str],
        message: str = "One or more fields failed validation",
    ) -> None:
        super().__init__(message, status_code=400)
        self.details = details


class NotFoundError(AppError):
    def __init__(self, message: str = "Resource not found") -> None:
        super().__init__(message, status_code=404)


class ConflictError(AppError):
    def __init__(self, message: str = "Conflict") -> None:
        super().__init__(message, status_code=409)


class InternalServerError(AppError):
    """Unanticipated failure.

    The underlying exception is chained (``raise ... from exc``) so it shows up
    in the logs; only ``message`` is ever sent to the client.
    """

    def __init__(self, message: str = "Internal server error") -> None:
        super().__init__(message, status_code=500)


# -------------------------
# Storage-level kinds
# -------------------------

class StorageError(Exception):
    """Any database failure the gateway could not classify."""


class DuplicateEmailError(StorageError):
    def __init__(self, email: str) -> None:
        super().__init__(f"email already stored: {email}")
        self.email = email
