"""
Typed errors raised by the crud layer, helpers and auth dependencies.

Each error carries the HTTP status it maps to. Translation into a JSON
response happens once, in jobly.core.errors.register_error_handlers.
"""

from typing import List, Union

ErrorMessage = Union[str, List[str]]


class JoblyError(Exception):
    """Base error for all Jobly errors."""

    status_code: int = 500

    def __init__(self, message: ErrorMessage, status_code: int = None) -> None:
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message if isinstance(message, str) else "; ".join(message))


class NotFoundError(JoblyError):
    """Raised when a referenced row (company, job, user, technology) does not exist."""

    status_code = 404

    def __init__(self, message: ErrorMessage = "Not Found") -> None:
        super().__init__(message)


class BadRequestError(JoblyError):
    """
    Raised for malformed input: empty update payloads, duplicates,
    failed body validation, or a non-admin calling an admin route.
    """

    status_code = 400

    def __init__(self, message: ErrorMessage = "Bad Request") -> None:
        super().__init__(message)


class UnauthorizedError(JoblyError):
    """Raised when credentials are missing, invalid or do not match."""

    status_code = 401

    def __init__(self, message: ErrorMessage = "Unauthorized") -> None:
        super().__init__(message)
