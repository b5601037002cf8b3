"""
Test helpers shared across unit, integration and adversarial suites.
"""

import threading
from typing import Optional

from psycopg_pool import ConnectionPool

from src.domain.exceptions import UsernameOrEmailTaken
from src.domain.models import Account


class InMemoryAccountRepository:
    """
    AccountRepository backed by a list, enforcing email/username uniqueness
    on create() the way the database UNIQUE constraints do.
    """

    def __init__(self) -> None:
        self.accounts: list[Account] = []
        self.lookups = 0
        self._lock = threading.Lock()

    def find_by_email_or_username(self, email: str, username: str) -> Optional[Account]:
        self.lookups += 1
        for account in self.accounts:
            if account.email == email or account.username == username:
                return account
        return None

    def create(self, name: str, email: str, username: str, password_hash: str) -> Account:
        with self._lock:
            if any(a.email == email or a.username == username for a in self.accounts):
                raise UsernameOrEmailTaken()
            account = Account(
                id=len(self.accounts) + 1,
                name=name,
                email=email,
                username=username,
                password=password_hash,
            )
            self.accounts.append(account)
            return account


def count_users(pool: ConnectionPool) -> int:
    """Number of rows in the users table."""
    with pool.connection() as conn, conn.cursor() as cursor:
        cursor.execute("SELECT COUNT(*) FROM users")
        row = cursor.fetchone()
    assert row is not None
    return row[0]
