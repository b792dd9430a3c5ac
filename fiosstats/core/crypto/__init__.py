"""Cryptographic helpers for the gateway login."""
from .hashing import PasswordHasher, compute_hash, HEX_DIGEST_LENGTH

__all__ = [
    'PasswordHasher',
    'compute_hash',
    'HEX_DIGEST_LENGTH',
]
