"""
Authentication service for user registration, login and password changes.
"""
import logging

from motor.motor_asyncio import AsyncIOMotorDatabase

from akira.config import get_settings
from akira.core.exceptions import (
    BadRequestError,
    ConflictError,
    DuplicateEmailError,
    InternalError,
    NotFoundError,
)
from akira.core.security import (
    BcryptPasswordHasher,
    JWTTokenIssuer,
    UserStoreAuthenticator,
)
from akira.models.user import AuthenticatedIdentity, RoleName, User
from akira.repositories import MongoRoleRepository, MongoUserRepository
from akira.schemas.auth import (
    LoginRequest,
    RegisteredUserResponse,
    RegisterRequest,
    TokenResponse,
    UpdatePasswordRequest,
)
from akira.schemas.response import ApiResponse
from akira.services.ports import (
    Authenticator,
    PasswordHasher,
    RoleStore,
    TokenIssuer,
    UserStore,
)

logger = logging.getLogger(__name__)


def to_public_user(user: User) -> RegisteredUserResponse:
    """Project a stored user onto its public fields."""
    return RegisteredUserResponse(
        id=user.id,
        name=user.name,
        surname=user.surname,
        email=user.email,
        number_cellphone=user.number_cellphone,
        payment=user.payment,
        roles=list(user.roles),
    )


class AuthService:
    """
    Service for credential operations.

    Holds only references to its collaborators, so one instance can serve
    concurrent requests.
    """

    def __init__(
        self,
        users: UserStore,
        roles: RoleStore,
        hasher: PasswordHasher,
        authenticator: Authenticator,
        token_issuer: TokenIssuer,
        default_role: RoleName = RoleName.ROLE_USER,
    ):
        self.users = users
        self.roles = roles
        self.hasher = hasher
        self.authenticator = authenticator
        self.token_issuer = token_issuer
        self.default_role = RoleName(default_role)

    @classmethod
    def from_database(cls, db: AsyncIOMotorDatabase) -> "AuthService":
        """Wire the service with MongoDB stores, bcrypt and JWT."""
        users = MongoUserRepository(db)
        hasher = BcryptPasswordHasher()
        return cls(
            users=users,
            roles=MongoRoleRepository(db),
            hasher=hasher,
            authenticator=UserStoreAuthenticator(users, hasher),
            token_issuer=JWTTokenIssuer(),
            default_role=RoleName(get_settings().default_role),
        )

    async def register_user(
        self, request: RegisterRequest
    ) -> ApiResponse[RegisteredUserResponse]:
        """
        Register a new user with the default role.

        Args:
            request: Registration request

        Returns:
            ApiResponse with the public projection of the created user

        Raises:
            ConflictError: If the email is already registered
            InternalError: If the default role is missing from the store
        """
        duplicate_message = f"Email '{request.email}' is already registered"

        if await self.users.exists_by_email(request.email):
            logger.warning("Registration rejected: email already registered")
            raise ConflictError(duplicate_message)

        role = await self.roles.find_by_name(self.default_role)
        if role is None:
            logger.error(f"Default role {self.default_role.value} is missing from the role store")
            raise InternalError(
                f"Could not register user: role {self.default_role.value} not found"
            )

        user = User(
            name=request.name,
            surname=request.surname,
            email=request.email,
            number_cellphone=request.number_cellphone,
            payment=request.payment,
            hashed_password=self.hasher.hash(request.password),
            roles=[role.name],
        )

        # A concurrent registration can pass the pre-check; the store decides
        try:
            saved = await self.users.save(user)
        except DuplicateEmailError:
            logger.warning("Registration rejected by unique email constraint")
            raise ConflictError(duplicate_message)

        logger.info(f"Registered user {saved.id}")

        return ApiResponse[RegisteredUserResponse].success(
            "Registration successful",
            to_public_user(saved),
        )

    async def login(self, request: LoginRequest) -> ApiResponse[TokenResponse]:
        """
        Authenticate user and return a JWT token.

        Args:
            request: Login request with email and password

        Returns:
            ApiResponse with the token and the user's public fields

        Raises:
            UnauthorizedError: If credentials are invalid
            InternalError: If the authenticated user cannot be loaded
        """
        identity = await self.authenticator.authenticate(request.email, request.password)

        user = await self.users.find_by_email(request.email)
        if user is None:
            logger.error(f"Authenticated user {identity.user_id} not found in user store")
            raise InternalError("Could not load the authenticated user")

        token = self.token_issuer.issue(identity)

        logger.info(f"User {user.id} logged in")

        return ApiResponse[TokenResponse].success(
            "Authentication successful",
            TokenResponse(
                token=token,
                id=user.id,
                name=user.name,
                surname=user.surname,
                number_cellphone=user.number_cellphone,
                email=user.email,
            ),
        )

    async def update_password(self, request: UpdatePasswordRequest) -> ApiResponse[None]:
        """
        Change a user's password after verifying the current one.

        Args:
            request: Email, current password and new password

        Returns:
            ApiResponse with no payload

        Raises:
            NotFoundError: If no user has this email
            BadRequestError: If the current password is incorrect
        """
        user = await self.users.find_by_email(request.email)

        if user is None:
            raise NotFoundError("User not found")

        if not self.hasher.verify(request.old_password, user.hashed_password):
            logger.warning(f"Password change rejected for user {user.id}: wrong current password")
            raise BadRequestError("Current password is incorrect")

        updated = user.model_copy(
            update={"hashed_password": self.hasher.hash(request.new_password)}
        )
        await self.users.save(updated)

        logger.info(f"Password updated for user {user.id}")

        return ApiResponse[None].success("Password updated successfully")

    async def get_profile(
        self, identity: AuthenticatedIdentity
    ) -> ApiResponse[RegisteredUserResponse]:
        """
        Get the public profile of an authenticated user.

        Raises:
            NotFoundError: If the user no longer exists
        """
        user = await self.users.find_by_id(identity.user_id)

        if user is None:
            raise NotFoundError("User not found")

        return ApiResponse[RegisteredUserResponse].success(
            "User retrieved successfully",
            to_public_user(user),
        )
