"""
Domain exceptions - Semantic error types for registration.

This module defines domain-specific exceptions that communicate
business rule violations without leaking infrastructure details.
Each exception carries an ErrorKind tag; the transport layer maps
kinds to status codes.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Tag for every registration failure mode."""

    VALIDATION = "validation"
    CONFLICT = "conflict"
    PERSISTENCE = "persistence"


class RegistrationError(Exception):
    """Base class for registration domain errors."""

    kind: ErrorKind


class InvalidRegistration(RegistrationError):
    """Registration input failed validation.

    Carries a mapping of field path to messages for per-field display.
    """

    kind = ErrorKind.VALIDATION

    def __init__(self, errors: dict[str, list[str]]) -> None:
        super().__init__(f"Invalid registration: {', '.join(sorted(errors))}")
        self.errors = errors


class UsernameOrEmailTaken(RegistrationError):
    """An account with the same email or username already exists."""

    kind = ErrorKind.CONFLICT

    def __init__(self, message: str = "username or email is already taken") -> None:
        super().__init__(message)
        self.message = message


class PersistenceError(RegistrationError):
    """The account store rejected or failed the operation."""

    kind = ErrorKind.PERSISTENCE
