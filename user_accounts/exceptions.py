"""Exceptions raised by the accounts controllers and services.

Each exception carries the HTTP status code and the message that the client
sees in the ``error`` field of the response body.
"""

from fastapi import status


class AccountsError(RuntimeError):
    """Base class for errors that are reported to the client."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(AccountsError):
    """Request data is missing or malformed."""


class ConflictError(AccountsError):
    """A user with the same username or e-mail already exists."""


class AuthError(AccountsError):
    """Credentials are wrong, or there is no session."""


class NotFoundError(AccountsError):
    """No user matches the request."""


class StoreUnavailable(AccountsError):
    """The account store could not complete the operation."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class InvalidCookie(ValueError):
    """The session cookie is malformed."""
