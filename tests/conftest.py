"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- An in-memory AccountRepository with real uniqueness semantics
- A low-cost bcrypt hasher for fast unit tests
- A wired RegistrationService
- A PostgreSQL pool for integration and adversarial tests (skipped when
  DATABASE_URL is unreachable)
"""

from collections.abc import Generator

import psycopg
import pytest
from psycopg_pool import ConnectionPool

from src.adapters.repository.postgres import run_migrations
from src.adapters.security.bcrypt_hasher import BcryptPasswordHasher
from src.adapters.validation.pydantic_validator import PydanticRegistrationValidator
from src.config.settings import get_settings
from src.domain.registration import RegistrationService
from tests.helpers import InMemoryAccountRepository


@pytest.fixture
def repository() -> InMemoryAccountRepository:
    """Empty in-memory account store."""
    return InMemoryAccountRepository()


@pytest.fixture
def hasher() -> BcryptPasswordHasher:
    """bcrypt hasher at the minimum cost to keep tests fast."""
    return BcryptPasswordHasher(cost=4)


@pytest.fixture
def service(
    repository: InMemoryAccountRepository, hasher: BcryptPasswordHasher
) -> RegistrationService:
    """RegistrationService wired to the in-memory store."""
    return RegistrationService(
        repository=repository,
        password_hasher=hasher,
        validator=PydanticRegistrationValidator(),
    )


@pytest.fixture
def valid_payload() -> dict[str, str]:
    """A registration body that passes every rule."""
    return {
        "name": "Ann Lee",
        "email": "ann@example.com",
        "username": "annlee",
        "password": "secret123",
        "confirmPassword": "secret123",
    }


@pytest.fixture(scope="session")
def pool() -> Generator[ConnectionPool, None, None]:
    """Create connection pool against DATABASE_URL, running migrations once."""
    settings = get_settings()
    try:
        with psycopg.connect(settings.database_url, connect_timeout=2):
            pass
    except psycopg.OperationalError as e:
        pytest.skip(f"PostgreSQL not available: {e}")

    pool = ConnectionPool(
        conninfo=settings.database_url,
        min_size=1,
        max_size=10,
        open=True,
    )
    run_migrations(pool)
    yield pool
    pool.close()
