"""Queries that look up a single user by one of its identity keys."""

from uuid import UUID

from rede.domain.user import User, UserNotFoundError, UserRepository


class GetUserByIdQuery:
    def __init__(self, user_repository: UserRepository) -> None:
        self._user_repo = user_repository

    async def execute(self, user_id: UUID) -> User:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(str(user_id))
        return user


class GetUserByIgnQuery:
    """Case-insensitive lookup by in-game name."""

    def __init__(self, user_repository: UserRepository) -> None:
        self._user_repo = user_repository

    async def execute(self, ign: str) -> User:
        user = await self._user_repo.find_by_ign(ign)
        if user is None:
            raise UserNotFoundError(ign)
        return user


class GetUserByEmailQuery:
    """Case-insensitive lookup by email address."""

    def __init__(self, user_repository: UserRepository) -> None:
        self._user_repo = user_repository

    async def execute(self, email: str) -> User:
        user = await self._user_repo.find_by_email(email)
        if user is None:
            raise UserNotFoundError(email)
        return user
