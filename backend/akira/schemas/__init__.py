"""
Request and response schemas for API endpoints.
"""
from akira.schemas.auth import (
    LoginRequest,
    RegisteredUserResponse,
    RegisterRequest,
    TokenResponse,
    UpdatePasswordRequest,
)
from akira.schemas.response import ApiResponse, ResponseStatus

__all__ = [
    # Auth
    "LoginRequest",
    "RegisterRequest",
    "RegisteredUserResponse",
    "TokenResponse",
    "UpdatePasswordRequest",
    # Envelope
    "ApiResponse",
    "ResponseStatus",
]
