"""
PostgreSQL repository adapter - Implements AccountRepository protocol.

This module provides the PostgreSQL implementation of the domain's
repository port using psycopg3 with raw SQL.

Uniqueness Design - Check-then-act Backstop:
-------------------------------------------
The registration service looks up existing accounts by email OR username
before hashing. That lookup is only a fast path: two concurrent requests
can both miss and race to insert. The UNIQUE constraints on users.email
and users.username (see migrations/) are the authoritative guarantee.
create() catches the resulting UniqueViolation and raises the same
UsernameOrEmailTaken the fast path raises, so callers cannot tell which
check fired.
"""

import logging
from pathlib import Path
from typing import Optional

import psycopg
from psycopg import errors as pg_errors
from psycopg.rows import class_row
from psycopg_pool import ConnectionPool

from src.domain.exceptions import PersistenceError, UsernameOrEmailTaken
from src.domain.models import Account

logger = logging.getLogger(__name__)


class PostgresAccountRepository:
    """
    Implements AccountRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries for security.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        """
        Initialize repository with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
        """
        self._pool = pool

    def find_by_email_or_username(self, email: str, username: str) -> Optional[Account]:
        """
        Find the first account matching email OR username in one query.

        Args:
            email: Normalized email address
            username: Username

        Returns:
            Matching Account or None

        Raises:
            PersistenceError: If the query fails
        """
        sql = """
            SELECT id, name, email, username, password
            FROM users
            WHERE email = %s OR username = %s
            LIMIT 1
        """

        try:
            with self._pool.connection() as conn, conn.cursor(row_factory=class_row(Account)) as cursor:
                cursor.execute(sql, (email, username))
                return cursor.fetchone()
        except psycopg.Error as e:
            logger.exception("Account lookup failed")
            raise PersistenceError("Account lookup failed") from e

    def create(self, name: str, email: str, username: str, password_hash: str) -> Account:
        """
        Insert a new account atomically.

        Args:
            name: Display name
            email: Normalized email address
            username: Username
            password_hash: bcrypt-hashed password from domain layer

        Returns:
            The created Account with its generated id

        Raises:
            UsernameOrEmailTaken: If the UNIQUE constraint on email or username fires
            PersistenceError: For any other database failure
        """
        sql = """
            INSERT INTO users (name, email, username, password)
            VALUES (%s, %s, %s, %s)
            RETURNING id, name, email, username, password
        """

        try:
            with self._pool.connection() as conn, conn.cursor(row_factory=class_row(Account)) as cursor:
                cursor.execute(sql, (name, email, username, password_hash))
                account = cursor.fetchone()
                conn.commit()
        except pg_errors.UniqueViolation as e:
            logger.info("Insert rejected by unique constraint: %s", e.diag.constraint_name)
            raise UsernameOrEmailTaken() from e
        except psycopg.Error as e:
            logger.exception("Account insert failed")
            raise PersistenceError("Account insert failed") from e

        if account is None:
            raise PersistenceError("Account insert returned no row")
        return account


def run_migrations(pool: ConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 ConnectionPool instance
    """
    # Find migrations directory relative to this file
    # Structure: src/adapters/repository/postgres.py -> migrations/
    migrations_dir = Path(__file__).parent.parent.parent.parent / "migrations"

    if not migrations_dir.exists():
        logger.warning("Migrations directory not found: %s", migrations_dir)
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info("Running %d migration(s)", len(sql_files))

    for sql_file in sql_files:
        logger.info("Executing migration: %s", sql_file.name)
        try:
            sql_content = sql_file.read_text()

            with pool.connection() as conn:
                conn.execute(sql_content)
                # pool.connection() commits on clean exit

            logger.info("Migration complete: %s", sql_file.name)
        except Exception as e:
            logger.error("Migration failed: %s - %s", sql_file.name, e)
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
