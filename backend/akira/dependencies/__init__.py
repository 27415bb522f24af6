"""
Dependencies for dependency injection in routes.
"""
from akira.dependencies.auth import (
    CurrentIdentity,
    get_auth_service,
    get_current_identity,
)

__all__ = [
    "CurrentIdentity",
    "get_auth_service",
    "get_current_identity",
]
