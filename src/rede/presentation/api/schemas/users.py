"""Response schemas for user endpoints."""

from dataclasses import asdict
from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from rede.domain.user import User, UserRole


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PermissionsResponse(_CamelModel):
    can_create_post: bool
    can_delete_post: bool
    can_edit_post: bool
    can_fix_post: bool
    can_delete_all_post: bool
    can_edit_all_post: bool
    can_create_comment: bool
    can_delete_comment: bool
    can_edit_comment: bool
    can_delete_all_comment: bool
    can_edit_all_comment: bool
    can_delete_user: bool
    can_edit_user: bool


class UserResponse(_CamelModel):
    """Read model of a user.

    ``password`` carries the stored hash and is only set when the
    deployment exposes it (``API_EXPOSE_PASSWORD_HASH``).
    """

    id: UUID
    name: str
    surname: str
    name_with_surname: str
    discord: Optional[str] = None
    ign: str
    email: str
    password: Optional[str] = None
    avatar_url: str
    role: UserRole
    permissions: PermissionsResponse
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User, include_password: bool) -> "UserResponse":
        fields = {
            "id": user.id,
            "name": user.name,
            "surname": user.surname,
            "name_with_surname": user.name_with_surname,
            "discord": user.discord,
            "ign": user.ign,
            "email": user.email,
            "avatar_url": user.avatar_url,
            "role": user.role,
            "permissions": PermissionsResponse(**asdict(user.permissions)),
            "created_at": user.created_at,
            "updated_at": user.updated_at,
        }
        if include_password:
            fields["password"] = user.password_hash
        return cls(**fields)
