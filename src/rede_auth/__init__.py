"""Rede Auth - password hashing infrastructure.

This package is independent of the account domain. It provides:
- Password hashing and verification (bcrypt)
- Password length checks tied to the bcrypt input limit

Usage:
    from rede_auth import PasswordHashingService

    service = PasswordHashingService(rounds=10)
    digest = service.hash("plaintext")
"""

from rede_auth.exceptions import AuthError, WeakPasswordError
from rede_auth.services import PasswordHashingService

__all__ = [
    "AuthError",
    "PasswordHashingService",
    "WeakPasswordError",
]
