"""
User and role models for the akira_db database.
"""
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, EmailStr, Field


class RoleName(str, Enum):
    """Role names known to the application."""
    ROLE_USER = "ROLE_USER"


class Role(BaseModel):
    """
    Role document model for the akira_db.roles collection.
    """
    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    name: RoleName = Field(..., description="Unique role name")

    class Config:
        populate_by_name = True
        use_enum_values = True


class User(BaseModel):
    """
    User document model for the akira_db.users collection.
    """
    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    name: str = Field(..., description="First name")
    surname: str = Field(..., description="Last name")
    email: EmailStr = Field(..., description="Unique email address")
    number_cellphone: Optional[str] = Field(None, description="Contact phone number")
    payment: Optional[str] = Field(None, description="Payment method reference")
    hashed_password: str = Field(..., description="Bcrypt hashed password")
    roles: list[RoleName] = Field(
        default_factory=list,
        description="Names of the roles assigned to the user"
    )
    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Account creation timestamp"
    )

    class Config:
        populate_by_name = True
        use_enum_values = True


class AuthenticatedIdentity(BaseModel):
    """
    Identity produced by a successful authentication.

    Passed explicitly to whatever needs to know who the caller is.
    """
    user_id: str
    email: str
    roles: list[str] = Field(default_factory=list)

    class Config:
        frozen = True
