"""
Authentication request/response schemas.

JSON field names are camelCase; snake_case names are accepted on input too.
"""
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from akira.core.security import MAX_PASSWORD_BYTES


def _check_password_length(value: str) -> str:
    if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(f"must be at most {MAX_PASSWORD_BYTES} bytes")
    return value


class RegisterRequest(BaseModel):
    """Registration request body."""
    name: str = Field(..., min_length=1, description="First name")
    surname: str = Field(..., min_length=1, description="Last name")
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=1, description="User password")
    number_cellphone: Optional[str] = Field(
        None,
        alias="numberCellphone",
        description="Contact phone number"
    )
    payment: Optional[str] = Field(None, description="Payment method reference")

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, v: str) -> str:
        return _check_password_length(v)

    class Config:
        populate_by_name = True


class LoginRequest(BaseModel):
    """Login request body."""
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=1, description="User password")

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, v: str) -> str:
        return _check_password_length(v)


class UpdatePasswordRequest(BaseModel):
    """Password change request body."""
    email: EmailStr = Field(..., description="Email of the account to update")
    old_password: str = Field(
        ...,
        alias="oldPassword",
        min_length=1,
        description="Current password"
    )
    new_password: str = Field(
        ...,
        alias="newPassword",
        min_length=1,
        description="New password"
    )

    @field_validator("old_password", "new_password")
    @classmethod
    def passwords_fit_bcrypt(cls, v: str) -> str:
        """Longer secrets would be truncated by bcrypt."""
        return _check_password_length(v)

    class Config:
        populate_by_name = True


class RegisteredUserResponse(BaseModel):
    """Public projection of a user (never includes the password hash)."""
    id: str = Field(..., description="User ID")
    name: str = Field(..., description="First name")
    surname: str = Field(..., description="Last name")
    email: str = Field(..., description="User email")
    number_cellphone: Optional[str] = Field(
        None,
        alias="numberCellphone",
        description="Contact phone number"
    )
    payment: Optional[str] = Field(None, description="Payment method reference")
    roles: list[str] = Field(default_factory=list, description="Assigned role names")

    class Config:
        populate_by_name = True


class TokenResponse(BaseModel):
    """Login response with the issued access token."""
    token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", alias="tokenType", description="Token type")
    id: str = Field(..., description="Authenticated user ID")
    name: str = Field(..., description="First name")
    surname: str = Field(..., description="Last name")
    number_cellphone: Optional[str] = Field(
        None,
        alias="numberCellphone",
        description="Contact phone number"
    )
    email: str = Field(..., description="User email")

    class Config:
        populate_by_name = True
