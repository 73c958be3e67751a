"""SQLAlchemy implementation of UserRepository."""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from rede.domain.shared.time import ensure_tz_aware
from rede.domain.user import (
    Permissions,
    User,
    UserAlreadyExistsError,
    UserRepository,
)
from rede.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface.

    The repository flushes but never commits; the caller owns the
    transaction.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_page(self, offset: int, limit: int) -> list[User]:
        stmt = (
            select(UserModel)
            .order_by(UserModel.created_at, UserModel.id)
            .offset(offset)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        model = await self._find_model_by_id(user_id)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def find_by_ign(self, ign: str) -> Optional[User]:
        return await self._find_first(func.lower(UserModel.ign) == ign.lower())

    async def find_by_email(self, email: str) -> Optional[User]:
        return await self._find_first(func.lower(UserModel.email) == email.lower())

    async def find_conflicting(
        self,
        email: str,
        ign: str,
        discord: Optional[str] = None,
    ) -> Optional[User]:
        clauses = [
            func.lower(UserModel.email) == email.lower(),
            func.lower(UserModel.ign) == ign.lower(),
        ]
        if discord is not None:
            clauses.append(UserModel.discord == discord)
        return await self._find_first(or_(*clauses))

    async def save(self, user: User) -> None:
        existing = await self._find_model_by_id(user.id)

        try:
            if existing:
                self._update_model(existing, user)
                logger.debug("Updated user: %s", user.id)
            else:
                self._session.add(self._map_to_model(user))
                logger.debug("Inserted user: %s", user.id)

            await self._session.flush()
        except IntegrityError as e:
            if "unique" in str(e).lower():
                raise UserAlreadyExistsError from e
            raise

    async def delete(self, user_id: UUID) -> None:
        model = await self._find_model_by_id(user_id)

        if model:
            await self._session.delete(model)
            await self._session.flush()

    async def _find_first(self, condition) -> Optional[User]:
        stmt = (
            select(UserModel)
            .where(condition)
            .order_by(UserModel.created_at, UserModel.id)
            .limit(1)
        )
        result = await self._session.execute(stmt)
        model = result.scalars().first()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def _find_model_by_id(self, user_id: UUID) -> Optional[UserModel]:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            name=model.name,
            surname=model.surname,
            ign=model.ign,
            email=model.email,
            password_hash=model.password,
            avatar_url=model.avatar_url,
            discord=model.discord,
            role=model.role,
            permissions=Permissions.from_storage(model.permissions),
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id,
            name=user.name,
            surname=user.surname,
            name_with_surname=user.name_with_surname,
            discord=user.discord,
            ign=user.ign,
            email=user.email,
            password=user.password_hash,
            avatar_url=user.avatar_url,
            role=user.role.value,
            permissions=user.permissions.to_storage(),
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def _update_model(self, model: UserModel, user: User) -> None:
        model.name = user.name
        model.surname = user.surname
        model.name_with_surname = user.name_with_surname
        model.discord = user.discord
        model.ign = user.ign
        model.email = user.email
        model.password = user.password_hash
        model.avatar_url = user.avatar_url
        model.role = user.role.value
        model.permissions = user.permissions.to_storage()
        model.updated_at = user.updated_at
