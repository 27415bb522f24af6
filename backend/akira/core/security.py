"""
Security utilities for password hashing, JWT tokens and credential checks.
"""
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING, Any

from jose import JWTError, jwt
from passlib.context import CryptContext

from akira.config import get_settings
from akira.core.exceptions import UnauthorizedError
from akira.models.user import AuthenticatedIdentity

if TYPE_CHECKING:
    from akira.services.ports import PasswordHasher, UserStore

INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"

# bcrypt only reads the first 72 bytes of a secret
MAX_PASSWORD_BYTES = 72

# Password hashing context using bcrypt
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=get_settings().bcrypt_rounds,
    bcrypt__truncate_error=True,
)


def hash_password(plain_password: str) -> str:
    """
    Hash a plain password using bcrypt.

    Args:
        plain_password: The plain text password to hash

    Returns:
        Hashed password string

    Raises:
        PasswordTruncateError: If the password is longer than MAX_PASSWORD_BYTES
    """
    return pwd_context.hash(plain_password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password.

    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against

    Returns:
        True if password matches, False otherwise (including unreadable hashes
        and passwords longer than MAX_PASSWORD_BYTES)
    """
    if len(plain_password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        return False


def create_access_token(
    user_id: str,
    email: str,
    roles: list[str],
    expires_delta: timedelta | None = None,
) -> str:
    """
    Create a JWT access token.

    Args:
        user_id: Unique user identifier
        email: User email address
        roles: List of role names (e.g., ["ROLE_USER"])
        expires_delta: Optional custom expiration time

    Returns:
        Encoded JWT token string
    """
    settings = get_settings()

    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.jwt_access_token_expire_minutes)

    now = datetime.now(timezone.utc)

    payload = {
        "sub": user_id,
        "email": email,
        "roles": roles,
        "exp": now + expires_delta,
        "iat": now,
    }

    return jwt.encode(
        payload,
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
    )


def decode_token(token: str) -> dict[str, Any]:
    """
    Decode and validate a JWT token.

    Args:
        token: The JWT token string to decode

    Returns:
        Decoded payload dictionary with keys: sub, email, roles, exp, iat

    Raises:
        JWTError: If token is invalid or expired
    """
    settings = get_settings()

    return jwt.decode(
        token,
        settings.jwt_secret_key,
        algorithms=[settings.jwt_algorithm],
    )


class BcryptPasswordHasher:
    """Password hasher backed by the bcrypt CryptContext."""

    def hash(self, plain_password: str) -> str:
        return hash_password(plain_password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        return verify_password(plain_password, hashed_password)

    def dummy_verify(self) -> None:
        pwd_context.dummy_verify()


class JWTTokenIssuer:
    """Issues and reads signed JWT access tokens."""

    def issue(self, identity: AuthenticatedIdentity) -> str:
        return create_access_token(
            user_id=identity.user_id,
            email=identity.email,
            roles=list(identity.roles),
        )

    def decode(self, token: str) -> AuthenticatedIdentity:
        """
        Rebuild the identity a token was issued for.

        Raises:
            UnauthorizedError: If the token is invalid, expired or has no subject
        """
        try:
            payload = decode_token(token)
        except JWTError:
            raise UnauthorizedError("Could not validate credentials")

        user_id = payload.get("sub")
        if user_id is None:
            raise UnauthorizedError("Could not validate credentials")

        return AuthenticatedIdentity(
            user_id=user_id,
            email=payload.get("email", ""),
            roles=payload.get("roles", []),
        )


class UserStoreAuthenticator:
    """
    Verifies email/password pairs against the user store.

    Unknown emails and wrong passwords fail with the same message, and an
    unknown email still pays for one hash verification.
    """

    def __init__(self, users: "UserStore", hasher: "PasswordHasher"):
        self.users = users
        self.hasher = hasher

    async def authenticate(self, email: str, password: str) -> AuthenticatedIdentity:
        user = await self.users.find_by_email(email)

        if user is None:
            self.hasher.dummy_verify()
            raise UnauthorizedError(INVALID_CREDENTIALS_MESSAGE)

        if not self.hasher.verify(password, user.hashed_password):
            raise UnauthorizedError(INVALID_CREDENTIALS_MESSAGE)

        return AuthenticatedIdentity(
            user_id=user.id,
            email=user.email,
            roles=list(user.roles),
        )
