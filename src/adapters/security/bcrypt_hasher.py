"""
bcrypt password hasher adapter - Implements PasswordHasher protocol.

bcrypt only consumes the first 72 bytes of its input, and bcrypt >= 5
raises instead of truncating. Passwords may be up to 150 characters, so
both hash() and verify() truncate the encoded password to 72 bytes
explicitly, keeping the two operations consistent.
"""

import bcrypt

BCRYPT_MAX_PASSWORD_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]


class BcryptPasswordHasher:
    """
    Implements PasswordHasher protocol via bcrypt.

    Uses structural subtyping - no explicit inheritance from Protocol.
    The cost factor is fixed at construction from settings.
    """

    def __init__(self, cost: int = 10) -> None:
        self._cost = cost

    @property
    def cost(self) -> int:
        return self._cost

    def hash(self, password: str) -> str:
        """Hash password with a fresh salt at the configured cost."""
        return bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=self._cost)).decode()

    def verify(self, password: str, password_hash: str) -> bool:
        """Constant-time check of password against a stored bcrypt hash."""
        try:
            return bcrypt.checkpw(_encode(password), password_hash.encode())
        except ValueError:
            # Malformed stored hash
            return False
