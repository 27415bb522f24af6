"""
Uniform response envelope shared by every endpoint.
"""
from enum import Enum
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ResponseStatus(str, Enum):
    """Outcome of an operation."""
    SUCCESS = "SUCCESS"
    ERROR = "ERROR"


class ApiResponse(BaseModel, Generic[T]):
    """Response wrapper: message, status and an optional payload."""
    message: str = Field(..., description="Human-readable outcome")
    status: ResponseStatus = Field(..., description="SUCCESS or ERROR")
    data: Optional[T] = Field(None, description="Operation payload, null when there is none")

    @classmethod
    def success(cls, message: str, data: Optional[T] = None) -> "ApiResponse[T]":
        return cls(message=message, status=ResponseStatus.SUCCESS, data=data)

    @classmethod
    def error(cls, message: str) -> "ApiResponse[T]":
        return cls(message=message, status=ResponseStatus.ERROR, data=None)
