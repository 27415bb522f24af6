"""
Collaborator interfaces consumed by the credential service.

Each is a small ``typing.Protocol`` so Mongo adapters, bcrypt and JWT
implementations can be swapped for in-memory doubles in tests.
"""
from typing import Optional, Protocol

from akira.models.user import AuthenticatedIdentity, Role, RoleName, User


class UserStore(Protocol):
    """Persistence for user records."""

    async def exists_by_email(self, email: str) -> bool:
        ...

    async def find_by_email(self, email: str) -> Optional[User]:
        ...

    async def find_by_id(self, user_id: str) -> Optional[User]:
        ...

    async def save(self, user: User) -> User:
        """
        Insert a new user (assigning its id) or replace an existing one.

        Raises:
            DuplicateEmailError: If the write violates email uniqueness
        """
        ...


class RoleStore(Protocol):
    """Read access to stored roles."""

    async def find_by_name(self, name: RoleName) -> Optional[Role]:
        ...


class PasswordHasher(Protocol):
    """One-way password hashing."""

    def hash(self, plain_password: str) -> str:
        ...

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        ...

    def dummy_verify(self) -> None:
        """Spend the time of one verification without a real hash."""
        ...


class Authenticator(Protocol):
    """Verifies credentials."""

    async def authenticate(self, email: str, password: str) -> AuthenticatedIdentity:
        """
        Raises:
            UnauthorizedError: If the credentials do not match a user
        """
        ...


class TokenIssuer(Protocol):
    """Issues opaque bearer tokens for an authenticated identity."""

    def issue(self, identity: AuthenticatedIdentity) -> str:
        ...
