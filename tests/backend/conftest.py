"""
Backend-specific test fixtures and configuration.

These fixtures provide in-memory stand-ins for the AuthService
collaborators so service behavior can be checked without a database.
"""

import sys
from pathlib import Path
from typing import Optional

import pytest

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "backend"))

from akira.core.exceptions import DuplicateEmailError
from akira.core.security import BcryptPasswordHasher, JWTTokenIssuer, UserStoreAuthenticator
from akira.models.user import Role, RoleName, User
from akira.services.auth_service import AuthService


# =============================================================================
# In-memory collaborators
# =============================================================================

class InMemoryUserStore:
    """User store keeping users in a dict and counting writes."""

    def __init__(self):
        self.users: dict[str, User] = {}
        self.save_calls = 0
        self._next_id = 1

    async def exists_by_email(self, email: str) -> bool:
        return any(user.email == email for user in self.users.values())

    async def find_by_email(self, email: str) -> Optional[User]:
        for user in self.users.values():
            if user.email == email:
                return user
        return None

    async def find_by_id(self, user_id: str) -> Optional[User]:
        return self.users.get(user_id)

    async def save(self, user: User) -> User:
        self.save_calls += 1
        if user.id is None:
            if await self.exists_by_email(user.email):
                raise DuplicateEmailError(user.email)
            user = user.model_copy(update={"id": f"user-{self._next_id}"})
            self._next_id += 1
        self.users[user.id] = user
        return user


class RacingUserStore(InMemoryUserStore):
    """
    User store whose pre-check never sees the competing registration,
    while the write is rejected by the unique constraint.
    """

    async def exists_by_email(self, email: str) -> bool:
        return False

    async def save(self, user: User) -> User:
        self.save_calls += 1
        raise DuplicateEmailError(user.email)


class InMemoryRoleStore:
    """Role store over a fixed list of roles."""

    def __init__(self, roles: list[Role]):
        self.roles = {role.name: role for role in roles}

    async def find_by_name(self, name: RoleName) -> Optional[Role]:
        return self.roles.get(RoleName(name).value)


def build_service(users, roles) -> AuthService:
    hasher = BcryptPasswordHasher()
    return AuthService(
        users=users,
        roles=roles,
        hasher=hasher,
        authenticator=UserStoreAuthenticator(users, hasher),
        token_issuer=JWTTokenIssuer(),
    )


# =============================================================================
# Auth Service Fixtures
# =============================================================================

@pytest.fixture
def user_store() -> InMemoryUserStore:
    return InMemoryUserStore()


@pytest.fixture
def role_store() -> InMemoryRoleStore:
    return InMemoryRoleStore([Role(id="role-1", name=RoleName.ROLE_USER)])


@pytest.fixture
def auth_service(user_store, role_store) -> AuthService:
    """AuthService wired with in-memory stores, bcrypt and JWT."""
    return build_service(user_store, role_store)


@pytest.fixture
def auth_service_without_roles(user_store) -> AuthService:
    """AuthService whose role store is missing the default role."""
    return build_service(user_store, InMemoryRoleStore([]))


@pytest.fixture
def racing_auth_service(role_store) -> AuthService:
    """AuthService whose user store loses a registration race."""
    return build_service(RacingUserStore(), role_store)


# =============================================================================
# Response Assertion Helpers
# =============================================================================

@pytest.fixture
def assert_error_response():
    """Helper to assert error envelope structure."""
    def _assert(response, status_code: int, message_contains: str = None):
        assert response.status_code == status_code
        data = response.json()
        assert data["status"] == "ERROR"
        assert data["data"] is None
        if message_contains:
            assert message_contains.lower() in data["message"].lower()
    return _assert
