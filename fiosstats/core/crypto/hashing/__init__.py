"""Password hashing."""
from .password_hash import PasswordHasher, compute_hash, HEX_DIGEST_LENGTH

__all__ = [
    'PasswordHasher',
    'compute_hash',
    'HEX_DIGEST_LENGTH',
]
