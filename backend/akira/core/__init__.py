"""
Core module - Security, errors and logging utilities.
"""
from akira.core.exceptions import (
    AkiraError,
    BadRequestError,
    ConflictError,
    DuplicateEmailError,
    InternalError,
    NotFoundError,
    UnauthorizedError,
)
from akira.core.security import (
    hash_password,
    verify_password,
    create_access_token,
    decode_token,
)

__all__ = [
    "AkiraError",
    "BadRequestError",
    "ConflictError",
    "DuplicateEmailError",
    "InternalError",
    "NotFoundError",
    "UnauthorizedError",
    "hash_password",
    "verify_password",
    "create_access_token",
    "decode_token",
]
