"""
Authentication router for registration, login and password changes.

Errors raised by the service are rendered by the application's exception
handlers as ``ApiResponse`` envelopes with status ``ERROR``.
"""
from typing import Annotated

from fastapi import APIRouter, Depends, status

from akira.dependencies.auth import CurrentIdentity, get_auth_service
from akira.schemas.auth import (
    LoginRequest,
    RegisteredUserResponse,
    RegisterRequest,
    TokenResponse,
    UpdatePasswordRequest,
)
from akira.schemas.response import ApiResponse
from akira.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["Authentication"])

AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]


@router.post(
    "/register",
    response_model=ApiResponse[RegisteredUserResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
)
async def register(body: RegisterRequest, auth_service: AuthServiceDep):
    """
    Register a new customer account with the default role.

    - **email**: Valid email address (must be unique)
    - **password**: Plain password, stored only as a bcrypt hash
    - **name**, **surname**, **numberCellphone**, **payment**: Profile data
    """
    return await auth_service.register_user(body)


@router.post(
    "/login",
    response_model=ApiResponse[TokenResponse],
    summary="Login and get access token",
)
async def login(body: LoginRequest, auth_service: AuthServiceDep):
    """
    Authenticate with email and password to receive a JWT token.

    Send the token as `Authorization: Bearer <token>` to protected endpoints.
    """
    return await auth_service.login(body)


@router.put(
    "/update-password",
    response_model=ApiResponse[None],
    summary="Change a user's password",
)
async def update_password(body: UpdatePasswordRequest, auth_service: AuthServiceDep):
    """
    Replace the password of an account after checking the current one.
    """
    return await auth_service.update_password(body)


@router.get(
    "/me",
    response_model=ApiResponse[RegisteredUserResponse],
    summary="Get current user info",
)
async def get_current_user_info(identity: CurrentIdentity, auth_service: AuthServiceDep):
    """
    Get the profile of the user the bearer token was issued to.
    """
    return await auth_service.get_profile(identity)
