"""
PeakPerformance Backend — Password Hashing
============================================

What:  One-way hashing of user credentials with bcrypt.
Why:   The `usuarios.contraseña` column must never hold plaintext.
How:   bcrypt with a per-hash random salt and a configurable cost factor.
       Hashing is CPU bound (~50-100ms at 10 rounds), so it runs in a worker
       thread to keep the event loop serving other requests.
Who:   Injected into the users resource service.
"""

import asyncio

import bcrypt

# bcrypt only reads this many bytes of input; 5.x raises on anything longer
MAX_CREDENTIAL_BYTES = 72


class PasswordHasher:
    """Produces bcrypt digests as text (e.g. ``$2b$10$...``)."""

    def __init__(self, rounds: int = 10):
        self.rounds = rounds

    def _hash_sync(self, plaintext: str) -> str:
        secret = plaintext.encode("utf-8")[:MAX_CREDENTIAL_BYTES]
        digest = bcrypt.hashpw(secret, bcrypt.gensalt(rounds=self.rounds))
        return digest.decode("utf-8")

    async def hash(self, plaintext) -> str:
        """
        Hash a credential.

        Non-string values (a numeric PIN sent as a JSON number) are hashed
        through their string form. Only the first 72 bytes of the UTF-8
        encoding take part, so longer credentials are accepted.
        """
        return await asyncio.to_thread(self._hash_sync, str(plaintext))
