"""
API request and response models.

Pydantic models for FastAPI endpoint serialization and OpenAPI schema generation.
The request body schema lives with the validator adapter and is re-exported here.
"""

from typing import Generic, TypeVar, Union

from pydantic import BaseModel

from src.adapters.validation import RegisterUserRequest
from src.domain.models import RegisteredUser

T = TypeVar("T")


class UserResponse(BaseModel):
    """Public view of a registered user. Never carries the password or id."""

    email: str
    username: str
    name: str

    @classmethod
    def from_domain(cls, user: RegisteredUser) -> "UserResponse":
        return cls(email=user.email, username=user.username, name=user.name)


class DataResponse(BaseModel, Generic[T]):
    """Success envelope: {"data": ...}."""

    data: T


class ErrorResponse(BaseModel):
    """Error envelope: a message or a field path -> messages map."""

    errors: Union[str, dict[str, list[str]]]


__all__ = ["DataResponse", "ErrorResponse", "RegisterUserRequest", "UserResponse"]
