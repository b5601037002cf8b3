"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from typing import Any, Optional, Protocol

from .models import Account, ValidationResult


class AccountRepository(Protocol):
    """Port interface for account persistence."""

    def find_by_email_or_username(self, email: str, username: str) -> Optional[Account]:
        """
        Find the first account whose email OR username matches.

        This is a fast-path check only. The store's UNIQUE constraints
        remain the authoritative guarantee.

        Args:
            email: Normalized email address
            username: Username as submitted

        Returns:
            The matching Account, or None if neither value is in use
        """
        ...

    def create(self, name: str, email: str, username: str, password_hash: str) -> Account:
        """
        Insert a new account in a single atomic write.

        Args:
            name: Display name
            email: Normalized email address
            username: Username
            password_hash: bcrypt hash of the password

        Returns:
            The created Account including its generated id

        Raises:
            UsernameOrEmailTaken: If a uniqueness constraint rejects the row
            PersistenceError: For any other store failure
        """
        ...


class PasswordHasher(Protocol):
    """Port interface for one-way password hashing."""

    def hash(self, password: str) -> str:
        """Return a salted adaptive hash of the plaintext password."""
        ...

    def verify(self, password: str, password_hash: str) -> bool:
        """Check a plaintext password against a stored hash."""
        ...


class RegistrationValidator(Protocol):
    """Port interface for structured registration input validation."""

    def validate(self, raw: Any) -> ValidationResult:
        """
        Validate raw registration input.

        All field violations are collected in a single pass.

        Returns:
            Ok(RegistrationRequest) on success, Err(field_errors) otherwise
        """
        ...
