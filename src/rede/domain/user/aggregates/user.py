"""User aggregate for community accounts."""

from collections.abc import Mapping
from datetime import datetime
from typing import Union
from uuid import UUID, uuid4

from rede.domain.shared.time import utc_now
from rede.domain.user.value_objects import (
    Permissions,
    UserRole,
    default_avatar_url,
)


class User:
    """
    User aggregate root.

    ``name_with_surname`` is derived from ``name`` and ``surname`` and can
    never be set directly. The password is only ever held as a hash.
    """

    def __init__(  # NOQA: PLR0913
        self,
        name: str,
        surname: str,
        ign: str,
        email: str,
        password_hash: str,
        avatar_url: str,
        discord: str | None = None,
        role: Union[str, UserRole] = UserRole.MEMBER,
        permissions: Permissions | None = None,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._id = id or uuid4()
        self._name = name
        self._surname = surname
        self._ign = ign
        self._email = email
        self._discord = discord
        self._password_hash = password_hash
        self._avatar_url = avatar_url
        self._role = role if isinstance(role, UserRole) else UserRole(role)
        self._permissions = permissions or Permissions()
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def surname(self) -> str:
        return self._surname

    @property
    def name_with_surname(self) -> str:
        return f"{self._name} {self._surname}"

    @property
    def ign(self) -> str:
        return self._ign

    @property
    def email(self) -> str:
        return self._email

    @property
    def discord(self) -> str | None:
        return self._discord

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def avatar_url(self) -> str:
        return self._avatar_url

    @property
    def role(self) -> UserRole:
        return self._role

    @property
    def permissions(self) -> Permissions:
        return self._permissions

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def apply_changes(  # NOQA: PLR0913
        self,
        *,
        name: str | None = None,
        surname: str | None = None,
        discord: str | None = None,
        ign: str | None = None,
        email: str | None = None,
        password_hash: str | None = None,
        avatar_url: str | None = None,
        role: UserRole | None = None,
        permissions: Mapping[str, bool | None] | None = None,
    ) -> None:
        """Apply a partial update.

        Arguments left as ``None`` keep their current value. ``permissions``
        is merged flag by flag into the current permissions. The avatar is
        not re-derived when ``ign`` changes.
        """
        if name is not None:
            self._name = name
        if surname is not None:
            self._surname = surname
        if discord is not None:
            self._discord = discord
        if ign is not None:
            self._ign = ign
        if email is not None:
            self._email = email
        if password_hash is not None:
            self._password_hash = password_hash
        if avatar_url is not None:
            self._avatar_url = avatar_url
        if role is not None:
            self._role = role
        if permissions is not None:
            self._permissions = self._permissions.merge(permissions)

        self._updated_at = utc_now()

    @classmethod
    def create(  # NOQA: PLR0913
        cls,
        name: str,
        surname: str,
        ign: str,
        email: str,
        password_hash: str,
        discord: str | None = None,
        avatar_url: str | None = None,
        role: UserRole = UserRole.MEMBER,
        permissions: Permissions | None = None,
    ) -> "User":
        return cls(
            name=name,
            surname=surname,
            ign=ign,
            email=email,
            password_hash=password_hash,
            discord=discord,
            avatar_url=avatar_url or default_avatar_url(ign),
            role=role,
            permissions=permissions,
        )

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        name: str,
        surname: str,
        ign: str,
        email: str,
        password_hash: str,
        avatar_url: str,
        discord: str | None,
        role: Union[str, UserRole],
        permissions: Permissions,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            name=name,
            surname=surname,
            ign=ign,
            email=email,
            password_hash=password_hash,
            avatar_url=avatar_url,
            discord=discord,
            role=role,
            permissions=permissions,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, ign={self._ign})"
