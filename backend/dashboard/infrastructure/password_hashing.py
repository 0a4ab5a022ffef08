"""Password Hashing — bcrypt with a fresh random salt per password.

Invariants:
    - Every hash() call generates a new salt (same password -> different hash)
    - Cost factor comes from settings (default 10)
    - Plaintext is encoded and dropped; it is never stored or logged

Design Decisions:
    - bcrypt runs in a worker thread (asyncio.to_thread): cost 10 is ~50-100ms of CPU
      that would otherwise block the event loop
"""

import asyncio

import bcrypt

from dashboard.core.domain_types import PasswordHash

# bcrypt only reads the first 72 bytes; newer releases raise instead of truncating
_BCRYPT_MAX_BYTES = 72


def _secret(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


class BcryptPasswordHasher:
    """PasswordHasher implementation backed by the bcrypt library."""

    def __init__(self, rounds: int = 10):
        self.rounds = rounds

    def _hash_sync(self, password: str) -> PasswordHash:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return PasswordHash(bcrypt.hashpw(_secret(password), salt).decode("ascii"))

    async def hash(self, password: str) -> PasswordHash:
        return await asyncio.to_thread(self._hash_sync, password)

    async def verify(self, password: str, password_hash: str) -> bool:
        try:
            return await asyncio.to_thread(
                bcrypt.checkpw,
                _secret(password),
                password_hash.encode("ascii"),
            )
        except ValueError:
            # Stored value is not a bcrypt hash
            return False
