"""
Domain layer - Pure business logic with zero framework imports.

This package contains the core business logic for account registration.
It defines its own port interfaces for infrastructure abstraction,
ensuring true hexagonal architecture decoupling.
"""

from .exceptions import (
    ErrorKind,
    InvalidRegistration,
    PersistenceError,
    RegistrationError,
    UsernameOrEmailTaken,
)
from .models import Account, Err, Ok, RegisteredUser, RegistrationRequest
from .ports import AccountRepository, PasswordHasher, RegistrationValidator
from .registration import RegistrationService

__all__ = [
    "Account",
    "AccountRepository",
    "Err",
    "ErrorKind",
    "InvalidRegistration",
    "Ok",
    "PasswordHasher",
    "PersistenceError",
    "RegisteredUser",
    "RegistrationError",
    "RegistrationRequest",
    "RegistrationService",
    "RegistrationValidator",
    "UsernameOrEmailTaken",
]
