"""User domain: community account identity and permissions.

This domain handles:
- User aggregate (identity, profile, role, permission flags)
- Role tiers and the fixed permission record
- Identifier parsing and default avatar derivation
"""

from rede.domain.user.aggregates import User
from rede.domain.user.exceptions import (
    InvalidUserIdError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from rede.domain.user.repositories import UserRepository
from rede.domain.user.value_objects import (
    Permissions,
    UserRole,
    default_avatar_url,
    parse_user_id,
)

__all__ = [
    "InvalidUserIdError",
    "Permissions",
    "User",
    "UserAlreadyExistsError",
    "UserNotFoundError",
    "UserRepository",
    "UserRole",
    "default_avatar_url",
    "parse_user_id",
]
