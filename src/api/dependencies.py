"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

from fastapi import Request
from psycopg_pool import ConnectionPool

from src.adapters.repository.postgres import PostgresAccountRepository
from src.adapters.security.bcrypt_hasher import BcryptPasswordHasher
from src.adapters.validation.pydantic_validator import PydanticRegistrationValidator
from src.config.settings import get_settings
from src.domain.registration import RegistrationService

# Module-level singleton - the validator is stateless
_validator = PydanticRegistrationValidator()


def get_pool(request: Request) -> ConnectionPool:
    """
    Get connection pool from app state.

    The pool is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.pool


def get_repository(request: Request) -> PostgresAccountRepository:
    """Create repository with connection pool from app state."""
    pool = get_pool(request)
    return PostgresAccountRepository(pool)


def get_password_hasher() -> BcryptPasswordHasher:
    """Create bcrypt hasher with the configured cost factor."""
    return BcryptPasswordHasher(cost=get_settings().bcrypt_cost)


def get_validator() -> PydanticRegistrationValidator:
    """Get registration validator (singleton)."""
    return _validator


def get_registration_service(request: Request) -> RegistrationService:
    """
    Create registration service with injected dependencies.

    Wires together the repository, password hasher and validator
    for the domain service.
    """
    return RegistrationService(
        repository=get_repository(request),
        password_hasher=get_password_hasher(),
        validator=get_validator(),
    )
