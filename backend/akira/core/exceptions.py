"""
Application error types.

Every error the credential service raises carries an HTTP status code and a
human-readable message. The API layer renders them with the standard
response envelope (see ``akira.main``).
"""
from fastapi import status


class AkiraError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequestError(AkiraError):
    """Malformed request or wrong current password."""
    status_code = status.HTTP_400_BAD_REQUEST


class UnauthorizedError(AkiraError):
    """Credentials could not be verified."""
    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(AkiraError):
    """Requested user does not exist."""
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(AkiraError):
    """Resource already exists (duplicate email)."""
    status_code = status.HTTP_409_CONFLICT


class InternalError(AkiraError):
    """Store or configuration inconsistency, never caused by user input."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class DuplicateEmailError(Exception):
    """
    Raised by a user store when a write violates the unique email constraint.

    Not an ``AkiraError``: the service translates it into ``ConflictError``.
    """

    def __init__(self, email: str):
        super().__init__(f"Duplicate email: {email}")
        self.email = email
