"""
Authentication dependencies for route wiring and protection.
"""
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from akira.core.exceptions import UnauthorizedError
from akira.core.security import JWTTokenIssuer
from akira.database.connections import get_database
from akira.models.user import AuthenticatedIdentity
from akira.services.auth_service import AuthService

bearer_scheme = HTTPBearer(auto_error=False)


async def get_auth_service() -> AuthService:
    """Dependency to get AuthService instance."""
    db = await get_database()
    return AuthService.from_database(db)


async def get_current_identity(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> AuthenticatedIdentity:
    """
    Dependency to get the caller's identity from the bearer token.

    Header: ``Authorization: Bearer <token>``

    Raises:
        UnauthorizedError: If the token is missing, invalid or expired
    """
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise UnauthorizedError("Could not validate credentials")

    return JWTTokenIssuer().decode(credentials.credentials)


# Type alias for cleaner route signatures
CurrentIdentity = Annotated[AuthenticatedIdentity, Depends(get_current_identity)]
