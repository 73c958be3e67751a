from rede.domain.user.value_objects.avatar import (
    AVATAR_BASE_URL,
    AVATAR_SIZE,
    default_avatar_url,
)
from rede.domain.user.value_objects.permissions import Permissions
from rede.domain.user.value_objects.user_id import parse_user_id
from rede.domain.user.value_objects.user_role import UserRole

__all__ = [
    "AVATAR_BASE_URL",
    "AVATAR_SIZE",
    "Permissions",
    "UserRole",
    "default_avatar_url",
    "parse_user_id",
]
