"""Errors raised by the repositories and the analytics engine.

Every error carries the HTTP status it is reported with; the app-level
exception handler renders it as ``{"error": <message>}``.
"""
from typing import Optional


class BookingAppError(Exception):
    status_code: int = 400

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(BookingAppError):
    """Missing or malformed fields in a create payload."""
    status_code = 400


class ReferenceNotFoundError(BookingAppError):
    """A booking points at a user or movie that does not exist."""
    status_code = 400

    def __init__(self, message: str = "User or Movie not found"):
        super().__init__(message)


class NotFoundError(BookingAppError):
    status_code = 404


class StoreError(BookingAppError):
    # analytics failures keep the default, write paths pass 400
    status_code = 500
