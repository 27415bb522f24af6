"""
Pydantic models for database documents and data structures.
"""
from akira.models.user import AuthenticatedIdentity, Role, RoleName, User

__all__ = [
    "AuthenticatedIdentity",
    "Role",
    "RoleName",
    "User",
]
