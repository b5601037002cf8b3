"""Input validation adapters."""

from .pydantic_validator import PydanticRegistrationValidator, RegisterUserRequest

__all__ = ["PydanticRegistrationValidator", "RegisterUserRequest"]
