"""
Pydantic registration validator - Implements RegistrationValidator protocol.

Validates raw request bodies against RegisterUserRequest and converts
the outcome into the domain's Ok/Err result instead of raising.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationError, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from src.domain.models import Err, Ok, RegistrationRequest, ValidationResult

EMAIL_MAX_LENGTH = 100

# Field path used when the body itself is not a JSON object
BODY_FIELD = "body"


class RegisterUserRequest(BaseModel):
    """Registration request body schema."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., min_length=3, max_length=100, description="Display name")
    email: EmailStr = Field(..., description="Email address (max 100 characters)")
    username: str = Field(..., min_length=3, max_length=100, description="Unique username")
    password: str = Field(..., min_length=8, max_length=150, description="Password (8-150 characters)")
    confirm_password: str = Field(
        ...,
        alias="confirmPassword",
        min_length=8,
        max_length=150,
        description="Must match password",
    )

    @field_validator("email", mode="before")
    @classmethod
    def email_shape(cls, value: Any) -> Any:
        if not isinstance(value, str):
            return value
        if len(value) > EMAIL_MAX_LENGTH:
            raise PydanticCustomError(
                "string_too_long",
                "String should have at most {max_length} characters",
                {"max_length": EMAIL_MAX_LENGTH},
            )
        # EmailStr would accept "Name <addr>" and padded input, then rewrite them
        if value != value.strip() or "<" in value or ">" in value:
            raise PydanticCustomError(
                "value_error",
                "value is not a valid email address: expected a bare address",
            )
        return value

    @field_validator("confirm_password")
    @classmethod
    def passwords_match(cls, value: str, info: ValidationInfo) -> str:
        # password is absent from info.data when it failed its own checks
        password = info.data.get("password")
        if password is not None and value != password:
            raise PydanticCustomError("password_mismatch", "Passwords do not match")
        return value


def _field_errors(exc: ValidationError) -> dict[str, list[str]]:
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        path = ".".join(str(part) for part in error["loc"]) or BODY_FIELD
        errors.setdefault(path, []).append(error["msg"])
    return errors


class PydanticRegistrationValidator:
    """
    Implements RegistrationValidator protocol via pydantic.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def validate(self, raw: Any) -> ValidationResult:
        """
        Validate raw input, collecting every field violation.

        Returns:
            Ok(RegistrationRequest) or Err(field path -> messages)
        """
        try:
            parsed = RegisterUserRequest.model_validate(raw)
        except ValidationError as exc:
            return Err(_field_errors(exc))

        return Ok(
            RegistrationRequest(
                name=parsed.name,
                email=str(parsed.email),
                username=parsed.username,
                password=parsed.password,
                confirm_password=parsed.confirm_password,
            )
        )
