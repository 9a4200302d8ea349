"""One-way encoding and verification of passwords and PINs."""

from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash


class SecretHasher:
    """Encode secrets into digests and verify plaintext against them.

    The same hasher is used for account passwords and PINs.
    """

    def __init__(self, method: str = "scrypt"):
        """Initialize the hasher.

        Args:
            method: Hash method understood by werkzeug (e.g. 'scrypt',
                'pbkdf2:sha256')
        """
        self.method = method

    def encode(self, plaintext: str) -> str:
        """Return the digest of a secret."""
        return generate_password_hash(plaintext, method=self.method)

    def verify(self, plaintext: str, digest: Optional[str]) -> bool:
        """Check a plaintext secret against a stored digest."""
        if not plaintext or not digest:
            return False
        return check_password_hash(digest, plaintext)
