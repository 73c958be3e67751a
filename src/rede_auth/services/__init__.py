"""Authentication services."""

from rede_auth.services.password_service import PasswordHashingService

__all__ = [
    "PasswordHashingService",
]
