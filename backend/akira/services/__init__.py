"""
Service layer for business logic.
"""
from akira.services.auth_service import AuthService

__all__ = [
    "AuthService",
]
