"""
Adapter: bcrypt password hasher.

Implements PasswordHasher port with salted bcrypt digests.
"""

import bcrypt

from app.domain.accounts.ports import PasswordHasher

DEFAULT_ROUNDS = 12


class BcryptPasswordHasher(PasswordHasher):
    """Hashes passwords with bcrypt.

    Each hash embeds its own random salt and cost factor, so hashing
    the same password twice gives two different strings.
    """

    def __init__(self, rounds: int = DEFAULT_ROUNDS) -> None:
        self._rounds = rounds

    def hash(self, password: str) -> str:
        """Return a bcrypt hash of the plaintext password."""
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify(self, password: str, hashed: str) -> bool:
        """Return True if the plaintext matches the stored hash."""
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
