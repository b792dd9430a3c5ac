"""Salted password hashing for the gateway login."""
import hashlib

HEX_DIGEST_LENGTH = hashlib.sha512().digest_size * 2


def compute_hash(password: str, salt: str) -> str:
    """
    Hash a password with the gateway-issued salt.

    The salt is appended to the password with no separator and the
    concatenation is digested with SHA-512. Undecodable command line bytes,
    carried as surrogates, are hashed as the original bytes.

    Args:
        password: Plaintext password
        salt: ``passwordSalt`` from the login challenge

    Returns:
        Lowercase hex digest (128 characters)
    """
    return hashlib.sha512((password + salt).encode('utf-8', 'surrogateescape')).hexdigest()


class PasswordHasher:
    """Computes login password hashes."""

    def hash(self, password: str, salt: str) -> str:
        """Computes the hex digest sent as the login ``password`` field."""
        return compute_hash(password, salt)
