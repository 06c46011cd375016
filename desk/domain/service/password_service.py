"""Password hashing domain service."""

import bcrypt

from .base import Service

# bcrypt only looks at the first 72 bytes
_MAX_PASSWORD_BYTES = 72


class PasswordService(Service):
    """Hashes and verifies account passwords with bcrypt."""

    def __init__(self, rounds: int = 12) -> None:
        """Initialize password service.

        Args:
            rounds: bcrypt cost factor
        """
        self.rounds = rounds
        # Compared against when no account exists so both failure paths
        # cost one full bcrypt check.
        self._dummy_hash = self.hash("not-a-real-password")

    def hash(self, plain_password: str) -> str:
        """Hash a plaintext password for storage."""
        pw_bytes = plain_password.encode("utf-8")[:_MAX_PASSWORD_BYTES]
        return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=self.rounds)).decode(
            "utf-8"
        )

    def compare(self, plain_password: str, hashed: str) -> bool:
        """Verify a plaintext password against a stored hash."""
        pw_bytes = plain_password.encode("utf-8")[:_MAX_PASSWORD_BYTES]
        try:
            return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
        except (ValueError, TypeError):
            return False

    def compare_dummy(self, plain_password: str) -> bool:
        """Run a full compare against a throwaway hash. Always False."""
        self.compare(plain_password, self._dummy_hash)
        return False
