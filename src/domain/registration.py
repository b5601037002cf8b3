"""
Registration domain service - Account creation pipeline.

This module contains the core business logic for user registration.

Pipeline (strictly sequential, one request at a time)
=====================================================

    Received -> Validated -> UniquenessChecked -> Hashed -> Persisted -> Responded

Failure modes:
- Validated:          InvalidRegistration (field errors, nothing touched)
- UniquenessChecked:  UsernameOrEmailTaken (no hashing, no write)
- Persisted:          UsernameOrEmailTaken (UNIQUE constraint backstop)
                      or PersistenceError (any other store failure)

Note: the email/username lookup is a fast path. Two concurrent requests
can both pass it; the repository maps the resulting constraint violation
back to UsernameOrEmailTaken.
"""

import logging
from dataclasses import dataclass
from typing import Any

from .exceptions import InvalidRegistration, UsernameOrEmailTaken
from .models import Err, RegisteredUser
from .ports import AccountRepository, PasswordHasher, RegistrationValidator

logger = logging.getLogger(__name__)


@dataclass
class RegistrationService:
    """
    Domain service for user registration.

    Orchestrates the registration flow: input validation, uniqueness
    check, password hashing and account persistence.
    """

    repository: AccountRepository
    password_hasher: PasswordHasher
    validator: RegistrationValidator

    def register(self, raw: Any) -> RegisteredUser:
        """
        Register a new account from raw request input.

        Args:
            raw: Decoded request body (expected to be a JSON object)

        Returns:
            Public projection of the created account (no password, no id)

        Raises:
            InvalidRegistration: If input fails validation
            UsernameOrEmailTaken: If email or username is already in use
            PersistenceError: If the store fails the write
        """
        result = self.validator.validate(raw)
        if isinstance(result, Err):
            raise InvalidRegistration(result.errors)
        request = result.value

        logger.info("Registering user %s", request.username)

        email = self._normalize_email(request.email)

        existing = self.repository.find_by_email_or_username(email, request.username)
        if existing is not None:
            logger.info("Registration rejected, username or email in use: %s", request.username)
            raise UsernameOrEmailTaken()

        password_hash = self.password_hasher.hash(request.password)

        account = self.repository.create(
            name=request.name,
            email=email,
            username=request.username,
            password_hash=password_hash,
        )
        logger.info("Registered user %s (id=%s)", account.username, account.id)
        return RegisteredUser.from_account(account)

    def _normalize_email(self, email: str) -> str:
        """
        Normalize email address for consistent storage and lookup.

        Applies: strip whitespace + lowercase
        """
        return email.strip().lower()
