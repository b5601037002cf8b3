"""
Domain models - Plain data carried through the registration pipeline.

Frozen dataclasses only; no framework types leak into the domain.
"""

from dataclasses import dataclass, field
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class RegistrationRequest:
    """Validated registration input (transient, never persisted as-is)."""

    name: str
    email: str
    username: str
    password: str = field(repr=False)
    confirm_password: str = field(repr=False)


@dataclass(frozen=True)
class Account:
    """Persisted account record. `password` is always the bcrypt hash."""

    id: int
    name: str
    email: str
    username: str
    password: str = field(repr=False)


@dataclass(frozen=True)
class RegisteredUser:
    """Public projection of an Account returned to callers."""

    email: str
    username: str
    name: str

    @classmethod
    def from_account(cls, account: Account) -> "RegisteredUser":
        return cls(email=account.email, username=account.username, name=account.name)


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful validation result."""

    value: T


@dataclass(frozen=True)
class Err:
    """Failed validation result: field path -> messages."""

    errors: dict[str, list[str]]


ValidationResult = Union[Ok[RegistrationRequest], Err]
