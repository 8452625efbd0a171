"""
Cryptographic helpers for password hashing and OTP hashing.

Uses argon2 for passwords (via argon2-cffi) and SHA-256 for one-time codes.
"""

from __future__ import annotations

import hashlib

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError

_password_hasher = PasswordHasher()


def hash_password(plain_password: str) -> str:
    """Hash *plain_password* with argon2id.

    Returns:
        Argon2 hash string (includes algorithm parameters and salt).
    """
    return _password_hasher.hash(plain_password)


def verify_password(plain_password: str, password_hash: str) -> bool:
    """Return ``True`` if *plain_password* matches the argon2 *password_hash*."""
    try:
        return _password_hasher.verify(password_hash, plain_password)
    except (VerificationError, InvalidHashError):
        return False


def hash_token(token: str) -> str:
    """Return the hex-encoded SHA-256 digest of *token*.

    OTP codes are hashed before they are stored so the plaintext is never
    persisted; lookups hash the submitted code the same way.
    """
    return hashlib.sha256(token.encode("utf-8")).hexdigest()
